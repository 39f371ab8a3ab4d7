"""Build-token processing for the orchestrator's argument vector."""

from __future__ import annotations

import warnings
from collections.abc import Callable, Mapping, Sequence

from kiln.errors import UnrecognizedArgumentWarning
from kiln.models import Backend, BuildConfiguration, OptimizationLevel
from kiln.observability import StructuredLogger

UNKNOWN_ARGUMENT_MESSAGE = "Unknown argument: {token}"


def _release(config: BuildConfiguration) -> None:
    config.backend = Backend.OPTIMIZING
    config.optimization_level = OptimizationLevel.HIGH


ARGUMENT_HANDLERS: Mapping[str, Callable[[BuildConfiguration], None]] = {
    "release": _release,
}


def apply_arguments(
    config: BuildConfiguration,
    args: Sequence[str],
    *,
    logger: StructuredLogger,
    workspace: str | None = None,
) -> tuple[str, ...]:
    """Apply recognised tokens in order and return the ones that were ignored.

    Later tokens win when they touch the same field. Unknown tokens are
    reported as warnings and never change the configuration.
    """
    unknown: list[str] = []
    for token in args:
        handler = ARGUMENT_HANDLERS.get(token)
        if handler is not None:
            handler(config)
            logger.log(
                operation="apply_argument",
                workspace=workspace,
                stage="configure",
                message=f"Applied argument: {token}",
                extra={"token": token},
            )
            continue

        message = UNKNOWN_ARGUMENT_MESSAGE.format(token=token)
        unknown.append(token)
        logger.log(
            operation="unknown_argument",
            workspace=workspace,
            stage="configure",
            message=message,
            level="warning",
            extra={"token": token},
        )
        warnings.warn(message, UnrecognizedArgumentWarning, stacklevel=2)
    return tuple(unknown)
