import math
import numpy


class Pose2:
    """A 2D Pose represented by rotation angle and translation vector."""

    def __init__(self, ang: float = 0.0, lin=None):
        """
        Args:
            ang: Rotation angle in radians
            lin: Translation vector [x, y]
        """
        self.ang = ang
        self.lin = numpy.zeros(2) if lin is None else numpy.asarray(lin, dtype=float)
        if self.lin.shape != (2,):
            raise ValueError("lin must be a 2D vector")
        self._rot_matrix = None  # Lazy computation

    @staticmethod
    def from_degrees(deg: float, lin=None):
        """Create a pose whose rotation is given in degrees."""
        return Pose2(ang=deg / 180.0 * math.pi, lin=lin)

    @staticmethod
    def translation(x: float, y: float):
        """Create a translation pose."""
        return Pose2(ang=0.0, lin=numpy.array([x, y], dtype=float))

    def rotation_matrix(self):
        """Get the 2x2 rotation matrix corresponding to the pose's orientation."""
        if self._rot_matrix is None:
            c = math.cos(self.ang)
            s = math.sin(self.ang)
            self._rot_matrix = numpy.array([
                [c, -s],
                [s,  c]
            ])
        return self._rot_matrix

    def transform_point(self, point) -> numpy.ndarray:
        """Transform a 2D point using the pose."""
        point = numpy.asarray(point, dtype=float)
        if point.shape != (2,):
            raise ValueError("point must be a 2D vector")
        R = self.rotation_matrix()
        return R @ point + self.lin

    def __mul__(self, other):
        """Compose this pose with another pose."""
        if not isinstance(other, Pose2):
            raise TypeError("Can only multiply Pose2 with Pose2")
        # angles add, other's translation is rotated into this frame
        R = self.rotation_matrix()
        return Pose2(ang=self.ang + other.ang, lin=self.lin + R @ other.lin)

    def __repr__(self):
        return f"Pose2(ang={self.ang}, lin={self.lin})"
