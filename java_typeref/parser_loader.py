import importlib

from loguru import logger
from tree_sitter import Language, Parser, Tree

from . import constants as cs
from . import exceptions as ex
from . import logs as ls
from .config import settings
from .types_defs import LanguageLoader


def _import_language_loader(module_path: str, attr_name: str) -> LanguageLoader:
    logger.debug(ls.IMPORTING_MODULE.format(module=module_path))
    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise RuntimeError(ex.GRAMMAR_UNAVAILABLE.format(module=module_path)) from e

    loader: LanguageLoader | None = getattr(module, attr_name, None)
    if loader is None:
        raise RuntimeError(
            ex.GRAMMAR_NO_ATTR.format(module=module_path, attr=attr_name)
        )
    return loader


def load_java_language() -> Language:
    try:
        loader = _import_language_loader(
            settings.JAVA_GRAMMAR_MODULE, settings.JAVA_GRAMMAR_ATTR
        )
        language = Language(loader())
    except Exception as e:
        logger.warning(ls.GRAMMAR_LOAD_FAILED.format(lang=cs.JAVA_LANGUAGE, error=e))
        raise

    logger.success(ls.GRAMMAR_LOADED.format(lang=cs.JAVA_LANGUAGE))
    return language


def load_java_parser() -> Parser:
    return Parser(load_java_language())


def parse_java(source: str, parser: Parser | None = None) -> Tree:
    parser = parser or load_java_parser()
    return parser.parse(source.encode(cs.ENCODING_UTF8))
