import sys
import warnings

_MIN_PYTHON = (3, 10)
_MIN_PYTHON_STR = ".".join(map(str, _MIN_PYTHON))

if sys.version_info < _MIN_PYTHON:
    warnings.warn(
        f"guard-summary is tested on Python {_MIN_PYTHON_STR}+ only. "
        "Older interpreters are not supported.",
        FutureWarning,
        stacklevel=2,
    )
