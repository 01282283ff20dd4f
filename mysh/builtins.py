"""commands that run inside the shell process instead of as a program

cd and exit only make sense here: a child can change neither the shell's
working directory nor end the shell. pwd and which run here too and write
to whatever stream the shell hands them, which may be the first pipe of a
pipeline.
"""

import logging
import os
import types

from mysh import config, errors

logger = logging.getLogger(__name__)


def _write(out, text):
    out.write(text + "\n")
    out.flush()


def cd(argv, out):
    if len(argv) < 2:
        raise errors.UsageError('expected argument to "cd"')
    path = argv[1]
    try:
        os.chdir(path)
    except OSError as e:
        raise errors.ShellError("cd: %s: %s" % (path, e.strerror))
    logger.info("changed directory to %s", path)
    return 0


def pwd(argv, out):
    try:
        cwd = os.getcwd()
    except OSError as e:
        raise errors.ShellError("pwd: %s" % e.strerror)
    _write(out, cwd)
    return 0


def exit_shell(argv, out):
    if len(argv) > 1:
        _write(out, "Exiting my shell: %s " % " ".join(argv[1:]))
    else:
        _write(out, "Exiting my shell")
    logger.info("exit requested")
    raise SystemExit(0)


def find_executable(name, search_path=None):
    """return the first `name` in `search_path` that is an executable file"""
    if search_path is None:
        search_path = config.SEARCH_PATH
    for directory in search_path:
        if not directory:
            continue
        path = os.path.join(directory, name)
        if os.path.isfile(path) and os.access(path, os.X_OK):
            return path
    return None


def which(argv, out):
    if len(argv) < 2:
        raise errors.UsageError('expected argument to "which"')
    name = argv[1]
    path = find_executable(name)
    if path is None:
        logger.debug("%r not found in %r", name, config.SEARCH_PATH)
        _write(out, "mysh: %s: command not found" % name)
        return 1
    _write(out, path)
    return 0


# built-ins that change the shell itself, the rest of their line is ignored
SHELL_STATE = frozenset(["cd", "exit"])

BUILTINS = types.MappingProxyType({
    "cd": cd,
    "pwd": pwd,
    "exit": exit_shell,
    "which": which,
})


def is_builtin(name):
    return name in BUILTINS


def get(name):
    return BUILTINS[name]


def affects_shell(name):
    return name in SHELL_STATE
