import glob
import logging

from mysh import errors, tokenizer

logger = logging.getLogger(__name__)

METACHARS = "*?["


def has_wildcard(token):
    return any(c in token for c in METACHARS)


def expand_token(token):
    """return the paths `token` matches, or [token] when nothing matches"""
    try:
        matches = sorted(glob.glob(token))
    except (OSError, ValueError) as e:
        raise errors.WildcardError(token, e)

    if not matches:
        logger.debug("pattern %r matched nothing, keeping it", token)
        return [token]
    logger.debug("pattern %r matched %d paths", token, len(matches))
    return matches


def expand(tokens):
    """expand every token containing a wildcard, in place of the token

    returns a new list, `tokens` is left alone. operators are never treated
    as patterns.
    """
    expanded = []
    for token in tokens:
        if tokenizer.is_operator(token) or not has_wildcard(token):
            expanded.append(token)
        else:
            expanded.extend(expand_token(token))
    return expanded
