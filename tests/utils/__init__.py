# tests/utils/__init__.py

from .constants import DEFAULT_TEST_LOG_LEVEL, PROJ_ROOT
from .flags import make_context, make_flag, write_config_file
from .patch_everywhere import patch_everywhere


__all__ = [  # noqa: RUF022
    # constants
    "DEFAULT_TEST_LOG_LEVEL",
    "PROJ_ROOT",
    # flags
    "make_context",
    "make_flag",
    "write_config_file",
    # patch_everywhere
    "patch_everywhere",
]
