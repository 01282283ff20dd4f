import collections
import logging

from mysh import errors, redirection, tokenizer, wildcard

logger = logging.getLogger(__name__)


class Stage(collections.namedtuple("Stage", "argv redirection")):
    """one command of a pipeline: the argument vector handed to the program
    and the files its standard streams are bound to"""

    @property
    def name(self):
        return self.argv[0]

    def __str__(self):
        return " ".join(self.argv)


def split(tokens):
    """split tokens into stages at every pipe, dropping the pipes

    >>> split(['ls', '|', 'wc', '-l'])
    [['ls'], ['wc', '-l']]
    """
    s = " ".join(tokens)
    stages = [[]]
    position = 0
    for token in tokens:
        if token == tokenizer.PIPE:
            if not stages[-1]:
                raise errors.PipelineError("empty command before '|'", s, position)
            stages.append([])
        else:
            stages[-1].append(token)
        position += len(token) + 1

    if not stages[-1]:
        raise errors.PipelineError("empty command after '|'", s, len(s))
    return stages


def build(tokens):
    """turn the tokens of a command line into a list of `Stage`s

    wildcards are expanded and redirections resolved separately for every
    stage. only the first stage may read from a file and only the last one
    may write to one, the pipes take care of the rest.
    """
    s = " ".join(tokens)
    stages = []
    argvs = split(tokens)
    last = len(argvs) - 1

    for idx, argv in enumerate(argvs):
        argv, redirect = redirection.resolve(wildcard.expand(argv))
        if not argv:
            raise errors.PipelineError("redirection without a command", s, 0)
        if redirect.stdin is not None and idx != 0:
            raise errors.PipelineError(
                "input redirection is only allowed on the first command of a pipeline",
                s, 0,
            )
        if redirect.stdout is not None and idx != last:
            raise errors.PipelineError(
                "output redirection is only allowed on the last command of a pipeline",
                s, 0,
            )
        stages.append(Stage(argv, redirect))

    logger.debug("built pipeline %r", stages)
    return stages
