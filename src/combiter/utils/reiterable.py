from collections.abc import Iterable
from logging import warning

from combiter.config import CombiterConfig, get_config
from combiter.utils.types import is_single_pass


class NotReiterableError(TypeError):
    """A single-pass source was given where the combinator restarts it."""


def check_reiterable(
    source: Iterable[object], role: str, config: CombiterConfig | None = None
) -> None:
    """
    Flags a single-pass source that a combinator will need to restart.

    Restarting such a source silently continues from wherever the previous
    pass stopped (usually the end), so the combinator would stop early. By
    default this only warns; with strict mode enabled it raises.

    Args:
        source: The iterable about to be bound to the combinator.
        role: Human-readable position of the source, used in the message.
        config: Overrides the process-wide config from get_config().
    """
    config = get_config() if config is None else config

    if not config.check_reiterable or not is_single_pass(source):
        return

    message = (
        f"{role} ({type(source).__name__}) is single-pass but must be "
        "re-iterable; materialize it (e.g. with list()) before passing it in"
    )

    if config.strict:
        raise NotReiterableError(message)
    warning(message)
