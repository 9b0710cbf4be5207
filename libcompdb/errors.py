# -*- coding: utf-8 -*-


class CompdbError(Exception):
    """Every failure that aborts a generation run"""


class CommandFailedError(CompdbError):
    def __init__(self, command, returncode=None, stderr=''):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr or ''
        if returncode is None:
            message = "could not run '%s'" % ' '.join(self.command)
        else:
            message = "'%s' exited with status %d" % (' '.join(self.command), returncode)
        if self.stderr.strip():
            message += "\n\n%s" % self.stderr.strip()
        super().__init__(message)


class MalformedOutputError(CompdbError):
    pass


class MissingLabelError(CompdbError):
    def __init__(self, target_id):
        self.target_id = target_id
        super().__init__("missing label (%s) in aquery output" % target_id)
