import collections
import contextlib
import logging
import os

from mysh import config, errors, tokenizer

logger = logging.getLogger(__name__)


class Redirection(collections.namedtuple("Redirection", "stdin stdout")):
    """the files a command reads its standard input from and writes its
    standard output to, None meaning the stream is inherited"""

    def __new__(cls, stdin=None, stdout=None):
        return super(Redirection, cls).__new__(cls, stdin, stdout)

    def __bool__(self):
        return self.stdin is not None or self.stdout is not None


def _position(argv, idx):
    return sum(len(t) + 1 for t in argv[:idx])


def resolve(argv):
    """pull `< file` and `> file` out of argv

    returns the argument vector the program should see and a `Redirection`.
    when an operator is repeated the last one wins.
    """
    stdin = stdout = None
    remaining = []

    i = 0
    while i < len(argv):
        token = argv[i]
        if token in (tokenizer.REDIRECT_IN, tokenizer.REDIRECT_OUT):
            if i + 1 == len(argv):
                s = " ".join(argv)
                raise errors.RedirectionError(
                    "missing file operand after %r" % token, s, _position(argv, i)
                )
            target = argv[i + 1]
            if token == tokenizer.REDIRECT_IN:
                stdin = target
            else:
                stdout = target
            i += 2
        else:
            remaining.append(token)
            i += 1

    redirection = Redirection(stdin, stdout)
    if redirection:
        logger.debug("resolved %r to %r", argv, redirection)
    return remaining, redirection


def _open(path, flags, mode, what):
    try:
        return os.open(path, flags, mode)
    except OSError as e:
        raise errors.RedirectionError(
            "%s redirection failed: %s: %s" % (what, path, e.strerror), path, 0
        )


@contextlib.contextmanager
def opened(redirection, mode=None):
    """open the files of `redirection` and yield (stdin_fd, stdout_fd)

    a stream that isn't redirected is yielded as None. whatever was opened is
    closed when the block exits.
    """
    if mode is None:
        mode = config.OUTPUT_MODE

    with contextlib.ExitStack() as stack:
        stdin_fd = stdout_fd = None
        if redirection.stdin is not None:
            stdin_fd = _open(redirection.stdin, os.O_RDONLY, 0, "input")
            stack.callback(os.close, stdin_fd)
        if redirection.stdout is not None:
            stdout_fd = _open(
                redirection.stdout, os.O_CREAT | os.O_TRUNC | os.O_WRONLY, mode, "output"
            )
            stack.callback(os.close, stdout_fd)
        yield stdin_fd, stdout_fd
