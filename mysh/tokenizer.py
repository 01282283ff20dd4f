import logging

from mysh import config, errors

logger = logging.getLogger(__name__)

PIPE = "|"
REDIRECT_IN = "<"
REDIRECT_OUT = ">"

OPERATORS = frozenset([PIPE, REDIRECT_IN, REDIRECT_OUT])


def tokenize(line, limit=None):
    """split a command line on runs of whitespace

    there is no quoting or escaping, an operator is only recognized when it is
    a token of its own.

    >>> tokenize('ls  -l |wc')
    ['ls', '-l', '|wc']
    >>> tokenize('   ')
    []
    """
    if limit is None:
        limit = config.MAX_LINE_LENGTH

    line = line.rstrip("\r\n")
    if limit and len(line) > limit:
        raise errors.LineTooLong(len(line), limit)

    tokens = line.split()
    logger.debug("tokenized %r into %r", line, tokens)
    return tokens


def is_operator(token):
    return token in OPERATORS
