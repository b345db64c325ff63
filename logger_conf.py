# logger_conf.py
import logging
import os

APP_LOGGER = "movie-explorer"
LOG_FILE = os.path.join(os.path.dirname(__file__), "movie_explorer.log")

def _configure(logger: logging.Logger) -> None:
    logger.setLevel(logging.DEBUG)
    # evita duplicar mensagens no root logger (streamlit configura o seu)
    logger.propagate = False

    # console handler (info)
    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    logger.addHandler(ch)

    # file handler (debug): fetches emitidos e respostas descartadas
    fh = logging.FileHandler(LOG_FILE, encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    logger.addHandler(fh)

def get_logger(name: str = APP_LOGGER):
    """
    Logger da aplicação. Os handlers ficam só em APP_LOGGER;
    get_logger(__name__) devolve um filho que propaga para ele.
    """
    app_logger = logging.getLogger(APP_LOGGER)
    if not app_logger.handlers:
        _configure(app_logger)
    if name == APP_LOGGER:
        return app_logger
    return app_logger.getChild(name)
