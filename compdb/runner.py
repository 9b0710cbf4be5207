import libcompdb

"""
Runners are chained with next(); each one hands its result to the following runner.
"""


class Runner(object):
    """Base class of the generation steps"""
    def __init__(self):
        self.next_runner = None

    def next(self, other_runner):
        self.next_runner = other_runner
        return self.next_runner

    def start(self, options, previous_result=None):
        return True, previous_result

    def run(self, options, previous_result=None):
        libcompdb.debug_message("%s started" % type(self).__name__)
        succeed, value = self.start(options, previous_result)
        if succeed is True:
            if self.next_runner is not None:
                return self.next_runner.run(options, value)
        return succeed, value
