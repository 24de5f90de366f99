import os

from dotenv import load_dotenv

load_dotenv()

APP_ENV = os.environ.get("APP_ENV", "local")
APP_LOG_LEVEL = int(os.environ.get("APP_LOG_LEVEL", "20"))

# an alternative catalogue in the osu-web `mods.json` layout
MODS_DEFINITIONS_PATH = os.environ.get("MODS_DEFINITIONS_PATH") or None
