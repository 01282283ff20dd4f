import os
import shutil
import stat
import tempfile
import unittest

from mysh import shell


class Capture:
    """a file the shell and its children both write to

    opened for appending so writes made through the file object and writes
    made by child processes through the descriptor never overwrite each other
    """

    def __init__(self, path):
        self.path = path
        self.file = open(path, "a")

    def read(self):
        self.file.flush()
        with open(self.path) as f:
            return f.read()

    def close(self):
        self.file.close()


def make_files(directory, *names, **kwargs):
    mode = kwargs.get("mode")
    paths = []
    for name in names:
        path = os.path.join(directory, name)
        with open(path, "w") as f:
            f.write(kwargs.get("content", ""))
        if mode is not None:
            os.chmod(path, mode)
        paths.append(path)
    return paths


def make_script(directory, name, body):
    path = os.path.join(directory, name)
    with open(path, "w") as f:
        f.write("#!/bin/sh\n" + body + "\n")
    os.chmod(path, os.stat(path).st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def current_umask():
    mask = os.umask(0)
    os.umask(mask)
    return mask


class TempDirTestCase(unittest.TestCase):
    """runs every test inside a fresh temporary working directory"""

    def setUp(self):
        self.old_cwd = os.getcwd()
        self.tmp = os.path.realpath(tempfile.mkdtemp(prefix="mysh-tests-"))
        self.addCleanup(shutil.rmtree, self.tmp, True)
        self.addCleanup(os.chdir, self.old_cwd)
        os.chdir(self.tmp)


class ShellTestCase(TempDirTestCase):
    """a shell whose output and errors end up in files of the test's own
    directory"""

    def setUp(self):
        super(ShellTestCase, self).setUp()
        self.capture_dir = tempfile.mkdtemp(prefix="mysh-capture-")
        self.addCleanup(shutil.rmtree, self.capture_dir, True)

        self.out = Capture(os.path.join(self.capture_dir, "stdout"))
        self.err = Capture(os.path.join(self.capture_dir, "stderr"))
        self.addCleanup(self.out.close)
        self.addCleanup(self.err.close)

        self.shell = shell.Shell(
            prompt="", banner="", stdout=self.out.file, stderr=self.err.file
        )
