class CondaShareError(Exception):
    """Base class for every error raised while building or saving a sharable env."""
    def __init__(self, msg):
        self.msg = msg
        super().__init__(self.msg)


class CommandExecutionFailed(CondaShareError):
    def __init__(self, executable, cause):
        self.executable = executable
        self.cause = cause
        super().__init__(
            f"Failed to execute conda command!"
            f"\nExecutable: `{executable}`"
            f"\nThis likely means the conda executable can't be found on your PATH."
            f"\nError message: {cause}"
        )


class CommandFailed(CondaShareError):
    def __init__(self, args, stderr):
        self.command = list(args)
        self.stderr = stderr
        super().__init__(
            f"conda command failed!"
            f"\nRan command: `conda {' '.join(self.command)}`"
            f"\nError message: {stderr}"
        )


class EncodingFailure(CondaShareError):
    def __init__(self, args, cause):
        self.command = list(args)
        self.cause = cause
        super().__init__(
            f"Output of `conda {' '.join(self.command)}` is not valid UTF-8: {cause}"
        )


class ParseFailure(CondaShareError):
    def __init__(self, source, cause):
        self.source = source
        self.cause = cause
        super().__init__(f"Failed to parse {source}: {cause}")


class EnvNotFound(CondaShareError):
    def __init__(self, env_name, available):
        self.env_name = env_name
        self.available = list(available)
        super().__init__(
            f"Conda environment '{env_name}' does not exist."
            f" Available environments: {self.available}"
        )


class MissingVersion(CondaShareError):
    def __init__(self, package):
        self.package = package
        super().__init__(f"Missing version for package '{package}'")


class IoFailure(CondaShareError):
    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write `{path}`: {cause}")
