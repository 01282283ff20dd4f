"""spawning and supervising the processes of a pipeline"""

import collections
import contextlib
import logging
import os
import signal
import subprocess
import sys

from mysh import errors, redirection

logger = logging.getLogger(__name__)

NOT_EXECUTABLE = 126
NOT_FOUND = 127


class ExitStatus(collections.namedtuple("ExitStatus", "code signal")):
    """how a process ended: a normal exit `code` or the `signal` that
    killed it, the other field is None"""

    @classmethod
    def from_returncode(cls, returncode):
        # subprocess reports death by signal N as -N
        if returncode < 0:
            return cls(None, -returncode)
        return cls(returncode, None)

    @classmethod
    def exited(cls, code):
        return cls(code, None)

    @property
    def success(self):
        return self.code == 0

    @property
    def exitcode(self):
        if self.signal is not None:
            return 128 + self.signal
        return self.code

    def describe(self):
        if self.signal is not None:
            return "terminated by signal %d" % self.signal
        if self.code:
            return "command failed with code %d" % self.code
        return None


class Descriptors:
    """the descriptors the shell opened for one command line

    a descriptor is closed as soon as it has been handed to its child,
    close_all() takes care of whatever is left on the way out.
    """

    def __init__(self):
        self._open = set()

    def add(self, fd):
        self._open.add(fd)
        return fd

    def pipe(self):
        r, w = os.pipe()
        return self.add(r), self.add(w)

    def close(self, fd):
        if fd in self._open:
            self._open.discard(fd)
            os.close(fd)

    def close_all(self):
        for fd in sorted(self._open):
            self.close(fd)

    def __contains__(self, fd):
        return fd in self._open

    def __len__(self):
        return len(self._open)


class Supervisor:
    """runs a list of `pipeline.Stage`s, one process per stage, and waits for
    all of them

    stdin, stdout and stderr are what the pipeline's ends are bound to when
    they aren't redirected, None meaning the shell's own streams.
    """

    def __init__(self, stdin=None, stdout=None, stderr=None):
        self.stdin = stdin
        self.stdout = stdout
        self.stderr = stderr

    def _report(self, message):
        err = self.stderr if self.stderr is not None else sys.stderr
        err.write("mysh: %s\n" % message)
        err.flush()

    def _popen(self, stage, stdin, stdout):
        try:
            return subprocess.Popen(
                stage.argv, stdin=stdin, stdout=stdout, stderr=self.stderr, close_fds=True
            )
        except FileNotFoundError:
            raise errors.CommandNotFound(stage.name, status=NOT_FOUND)
        except OSError as e:
            raise errors.CommandNotFound(stage.name, e.strerror, NOT_EXECUTABLE)

    def spawn(self, stage, stdin, stdout):
        """start one stage, returns its Popen or the ExitStatus it failed
        with"""
        try:
            proc = self._popen(stage, stdin, stdout)
        except errors.CommandNotFound as e:
            self._report(str(e))
            return ExitStatus.exited(e.status)

        logger.info("spawned %r as pid %d", str(stage), proc.pid)
        return proc

    def feed(self, source, fd):
        """run `source` in the shell with its output going to `fd`, which is
        closed afterwards so the reader sees end of input"""
        try:
            with open(fd, "w", closefd=False) as out:
                code = source(out)
        except BrokenPipeError:
            logger.debug("reader went away before the built-in finished")
            return ExitStatus(None, signal.SIGPIPE)
        except errors.ShellError as e:
            self._report(str(e))
            code = 1
        return ExitStatus.exited(code)

    def wait(self, proc):
        while True:
            try:
                returncode = proc.wait()
            except KeyboardInterrupt:
                # the child got the same interrupt, keep waiting for it to go
                logger.debug("interrupted while waiting for pid %d", proc.pid)
                continue
            status = ExitStatus.from_returncode(returncode)
            logger.info("pid %d finished with %r", proc.pid, status)
            return status

    def _pipes(self, fds, count):
        try:
            return [fds.pipe() for _ in range(count)]
        except OSError as e:
            raise errors.PipelineError("pipe failed: %s" % e.strerror, "", 0)

    def run(self, stages, source=None):
        """run every stage to completion, returns their `ExitStatus`es in
        stage order

        with a `source` the first stage is not spawned: `source` is called
        with a writable stream bound to the first pipe once the other stages
        are running.
        """
        assert stages
        assert source is None or len(stages) > 1
        n = len(stages)

        for stream in (sys.stdout, sys.stderr, self.stdout, self.stderr):
            if stream is not None and hasattr(stream, "flush"):
                stream.flush()

        fds = Descriptors()
        with contextlib.ExitStack() as stack:
            stack.callback(fds.close_all)
            pipes = self._pipes(fds, n - 1)

            # only the first stage reads from a file and only the last writes to one
            ends = redirection.Redirection(
                stages[0].redirection.stdin, stages[-1].redirection.stdout
            )
            first_in, last_out = stack.enter_context(redirection.opened(ends))

            running = []
            for k, stage in enumerate(stages):
                if k == 0 and source is not None:
                    running.append(None)
                    continue

                if k > 0:
                    stdin = pipes[k - 1][0]
                elif first_in is not None:
                    stdin = first_in
                else:
                    stdin = self.stdin

                if k < n - 1:
                    stdout = pipes[k][1]
                elif last_out is not None:
                    stdout = last_out
                else:
                    stdout = self.stdout

                running.append(self.spawn(stage, stdin, stdout))

                # the child has its own copies now
                if k > 0:
                    fds.close(pipes[k - 1][0])
                if k < n - 1:
                    fds.close(pipes[k][1])

            if source is not None:
                try:
                    running[0] = self.feed(source, pipes[0][1])
                finally:
                    fds.close(pipes[0][1])

            return [
                self.wait(p) if isinstance(p, subprocess.Popen) else p
                for p in running
            ]
