from dataclasses import dataclass

METHODS = ("finite_difference", "analytic")


@dataclass(frozen=True)
class DistortionConfig:
    step_exponent: float = -5.2         # finite-difference step is 10**step_exponent degrees
    method: str = "finite_difference"   # or "analytic" (closed-form Mercator partials)
    checked: bool = False               # raise on bad coordinates/bounds instead of returning nan/inf

    def __post_init__(self):
        if self.method not in METHODS:
            raise ValueError(f"Unknown distortion method {self.method!r}, expected one of {METHODS}")

    @property
    def step(self) -> float:
        return 10 ** self.step_exponent
