class HorizenScriptError(ValueError):

    def __init__(self, script: str = "", reason: str = ""):

        self.script = script  # hex of the offending script, when known
        self.reason = reason

    @property
    def msg(self):
        return self.reason

    def __str__(self):
        return self.msg


class ScriptDecodeError(HorizenScriptError):

    @property
    def msg(self):
        return f"Unable to decode the script '{self.script}' from hex ({self.reason})"


class ScriptParseError(HorizenScriptError):

    @property
    def msg(self):
        return f"Malformed script: {self.reason}"


class UnrecognizedScriptError(HorizenScriptError):

    @property
    def msg(self):
        return f"Unrecognized script '{self.script}' ({self.reason})"
