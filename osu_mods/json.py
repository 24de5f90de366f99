from typing import Any

import orjson
from pydantic import BaseModel

from osu_mods import codec
from osu_mods.acronym import Acronym
from osu_mods.game_mod import GameMod
from osu_mods.game_mods import GameMods
from osu_mods.game_mods_intermode import GameModsIntermode
from osu_mods.intermode import GameModIntermode


def _default_processor(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return _default_processor(data.model_dump())
    elif isinstance(data, dict):
        return {k: _default_processor(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_default_processor(v) for v in data]
    elif isinstance(data, GameMods):
        return codec.encode_mods(data)
    elif isinstance(data, GameMod):
        return codec.encode_mod(data)
    elif isinstance(data, GameModsIntermode):
        return codec.encode_intermode(data)
    elif isinstance(data, (GameModIntermode, Acronym)):
        return str(data)
    else:
        return data


def dumps(data: Any) -> bytes:
    return orjson.dumps(data, default=_default_processor)


def loads(data: str | bytes) -> Any:
    return orjson.loads(data)
