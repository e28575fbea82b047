"""
Twine command construction.
"""

from typing import List

from .models import UploadConfig


TWINE_COMMAND = "twine"

_SECRET_FLAGS = ("-p",)


def build_twine_args(config: UploadConfig) -> List[str]:
    """Construct the command line arguments for twine upload.

    The order is fixed; --skip-existing, when enabled, always sits directly
    before the trailing distribution path.
    """
    args = ["upload"]

    args.extend(["--repository-url", config.repository])
    args.extend(["-u", config.username])
    args.extend(["-p", config.password])

    if config.skip_existing:
        args.append("--skip-existing")

    args.append(config.dist_path)

    return args


def redact_args(args: List[str]) -> List[str]:
    """Copy of args with secret flag values masked, for logging"""
    redacted = list(args)
    for i, arg in enumerate(redacted[:-1]):
        if arg in _SECRET_FLAGS:
            redacted[i + 1] = "****"
    return redacted
