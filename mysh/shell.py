import functools
import logging
import sys

from mysh import builtins, config, driver, errors, pipeline, process, redirection, tokenizer

logger = logging.getLogger(__name__)


class Shell:
    """reads lines from a driver and runs them

    a command line is either a call to a built-in, which runs right here, or
    a pipeline of one or more programs that run as child processes. nothing
    a command does ends the loop, only `exit` and the end of the input do.
    """

    def __init__(self, read_line=None, prompt=None, banner=None, stdin=None, stdout=None, stderr=None):
        self.read_line = read_line or driver.read_line
        self.prompt = config.PROMPT if prompt is None else prompt
        self.banner = config.BANNER if banner is None else banner
        self._stdout = stdout
        self._stderr = stderr
        self.supervisor = process.Supervisor(stdin, stdout, stderr)
        self.last_status = 0

    @property
    def stdout(self):
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self):
        return self._stderr if self._stderr is not None else sys.stderr

    def _write(self, text):
        self.stdout.write(text)
        self.stdout.flush()

    def _report_error(self, e):
        if isinstance(e, errors.ParsingError):
            message = e.message
        else:
            message = str(e)
        logger.warning("%s: %s", type(e).__name__, message)
        self.stderr.write("mysh: %s\n" % message)
        self.stderr.flush()

    def _run_builtin(self, stages):
        stage = stages[0]
        handler = builtins.get(stage.name)
        if len(stages) > 1:
            logger.warning("%s runs in the shell, ignoring the rest of %r", stage.name, stages)

        logger.info("running built-in %r", str(stage))
        with redirection.opened(stage.redirection) as (_, out_fd):
            if out_fd is None:
                return handler(stage.argv, self.stdout)
            with open(out_fd, "w", closefd=False) as out:
                return handler(stage.argv, out)

    def _run(self, tokens):
        stages = pipeline.build(tokens)
        stage = stages[0]

        if builtins.is_builtin(stage.name):
            if len(stages) == 1 or builtins.affects_shell(stage.name):
                return self._run_builtin(stages)
            # the built-in's output feeds the rest of the pipeline
            source = functools.partial(builtins.get(stage.name), stage.argv)
            statuses = self.supervisor.run(stages, source=source)
        else:
            statuses = self.supervisor.run(stages)

        status = statuses[-1]
        message = status.describe()
        if message:
            self._write("mysh: %s\n" % message)
        return status.exitcode

    def execute(self, line):
        """run one command line, returns its exit status or None when there
        was nothing to run"""
        try:
            tokens = tokenizer.tokenize(line)
            if not tokens:
                return None
            status = self._run(tokens)
        except errors.ShellError as e:
            self._report_error(e)
            status = 1

        self._write("\n")
        self.last_status = status
        return status

    def loop(self):
        if self.banner:
            self._write(self.banner + "\n")

        while True:
            try:
                line = self.read_line(self.prompt)
            except KeyboardInterrupt:
                self._write("\n")
                continue
            if line is None:
                logger.info("end of input")
                break
            self.execute(line)
        return 0
