"""Copyright (c) 2025 DFlexy"""
"""https://github.com/DFlexy"""

import logging
import os
import sys

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.append(ROOT_DIR)

from app.config import load_config
from app.container import create_injector, get_bootstrap
from exceptions import BootstrapError

logger = logging.getLogger(__name__)


def create_app():
    load_config()
    return get_bootstrap(create_injector()).create_app()


def main() -> int:
    try:
        load_config()
        injector = create_injector()
        get_bootstrap(injector).run()
    except BootstrapError as e:
        logger.exception(f"Falha na inicialização ({type(e).__name__}): {e}")
        return e.exit_code
    except KeyboardInterrupt:
        logger.info("Interrompido pelo usuário")
        return 0
    except Exception as e:
        logger.exception(f"Erro inesperado na inicialização: {type(e).__name__}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
