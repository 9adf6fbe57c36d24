class MazeError(Exception):
    """Base class for every error raised by maze_carver."""


class ConfigError(MazeError, ValueError):
    """Invalid maze or rendering parameters."""


class RenderError(MazeError):
    """
    Drawing surface failure. `step` names what was being attempted
    (e.g. "create surface", "write image") so the CLI can report it.
    """
    def __init__(self, step: str, detail: str):
        super().__init__(f"{step} failed: {detail}")
        self.step = step
        self.detail = detail
