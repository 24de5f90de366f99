def pytest_sessionstart(session):
    """
    Called after the Session object has been created and
    before performing collection and entering the run test loop.
    """
    from osu_mods import logger
    from osu_mods import settings

    logger.configure_logging(settings.APP_ENV, settings.APP_LOG_LEVEL)
