import secrets

from ..exceptions import EntropySourceFailure
from ..util.misc import UINT32_MAX


def sample(max_: int) -> int:
    """
    Uniformly random integer in [0, max_) from the OS CSPRNG.

    ``secrets.randbelow`` rejects out-of-range draws instead of reducing them modulo ``max_``,
    so every value is equally likely. Errors from the entropy source are raised as
    EntropySourceFailure and there is no fallback to a weaker generator.
    """
    if not 0 < max_ <= UINT32_MAX:
        raise ValueError(f"max must be in [1, {UINT32_MAX}], got {max_}")
    try:
        return secrets.randbelow(max_)
    except (OSError, NotImplementedError) as e:
        raise EntropySourceFailure(str(e)) from e
