import numpy as np
from pydantic import BaseModel, Field
from scipy.spatial.transform import Rotation

FORWARD = np.array([0.0, 1.0, 0.0])


class Transform3D(BaseModel):
    position: np.ndarray = Field(default_factory=lambda: np.zeros(3))
    rotation: Rotation = Field(default_factory=Rotation.identity)

    class Config:
        arbitrary_types_allowed = True

    @property
    def forward(self) -> np.ndarray:
        """Unit vector the transform is heading to."""
        return self.rotation.apply(FORWARD)

    def translated(self, distance: float) -> np.ndarray:
        """Position reached after moving `distance` along the forward axis."""
        return self.position + self.forward * distance


def local_euler(rotation: Rotation, axis: str, degrees: float) -> Rotation:
    """Return updated rotation after applying a local-axis Euler rotation."""
    if abs(degrees) < 1e-9:
        return rotation
    delta = Rotation.from_euler(axis, degrees, degrees=True)
    # Local axis -> post-multiply
    return rotation * delta
