from enum import Enum


class Stage(Enum):
    CLASSIFICATION = "classification"
    RESOLUTION = "resolution"
    MUTATION = "mutation"
    INSTALL = "install"
    SCAFFOLD = "scaffold"


class ViewsError(Exception):
    """Fatal failure of one pipeline stage.

    Clean early exits (unsupported directory, already a Views project) are
    not errors; they come back as a PipelineResult with completed=False.
    """

    stage = None

    def __init__(self, message, stage=None):
        super().__init__(message)
        if stage is not None:
            self.stage = stage

    def __str__(self):
        if self.stage is None:
            return super().__str__()
        return f"[{self.stage.value}] {super().__str__()}"


class ManifestError(ViewsError):
    """package.json could not be read, parsed or written."""

    stage = Stage.MUTATION


class ResolutionError(ViewsError):
    stage = Stage.RESOLUTION

    def __init__(self, message, package=None):
        super().__init__(message)
        self.package = package


class InstallError(ViewsError):
    stage = Stage.INSTALL

    def __init__(self, message, command=None, returncode=None):
        super().__init__(message)
        self.command = command
        self.returncode = returncode


class ScaffoldError(ViewsError):
    stage = Stage.SCAFFOLD
