"""
Abstract Factory pattern: each factory produces one consistent family of
shapes (a curved one and a straight one).
"""
import threading
from abc import ABC, abstractmethod
from typing import List, Optional
from utils.logging_config import get_logger
from .factory import register_shape_factory

logger = get_logger(__name__)


class IdSequence:
    """Thread-safe, monotonically increasing integer sequence."""

    def __init__(self, start: int = 0):
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
        return value

    def peek(self) -> int:
        """Return the id the next call to next_id() will hand out."""
        with self._lock:
            return self._next


# Process-wide shape id sequence; never reset.
_shape_ids = IdSequence()


def get_shape_ids() -> IdSequence:
    """Return the process-wide shape id sequence."""
    return _shape_ids


class Shape(ABC):
    """Base shape; takes its id from a sequence at construction."""

    kind = "shape"

    def __init__(self, ids: Optional[IdSequence] = None):
        self.id = (ids or get_shape_ids()).next_id()

    def describe(self) -> str:
        return f"{self.kind} {self.id}: draw"

    @abstractmethod
    def draw(self):
        pass

    def __repr__(self):
        return f"{self.__class__.__name__}(id={self.id})"


class Circle(Shape):
    kind = "circle"

    def draw(self):
        print(self.describe())


class Square(Shape):
    kind = "square"

    def draw(self):
        print(self.describe())


class Ellipse(Shape):
    kind = "ellipse"

    def draw(self):
        print(self.describe())


class Rectangle(Shape):
    kind = "rectangle"

    def draw(self):
        print(self.describe())


class ShapeFactory(ABC):
    """Abstract factory for a family of curved and straight shapes."""

    def __init__(self, ids: Optional[IdSequence] = None):
        self.ids = ids or get_shape_ids()

    @abstractmethod
    def create_curved(self) -> Shape:
        pass

    @abstractmethod
    def create_straight(self) -> Shape:
        pass


@register_shape_factory('simple')
class SimpleShapeFactory(ShapeFactory):

    def create_curved(self) -> Shape:
        return Circle(self.ids)

    def create_straight(self) -> Shape:
        return Square(self.ids)


@register_shape_factory('robust')
class RobustShapeFactory(ShapeFactory):

    def create_curved(self) -> Shape:
        return Ellipse(self.ids)

    def create_straight(self) -> Shape:
        return Rectangle(self.ids)


def draw_shapes(factory: ShapeFactory) -> List[Shape]:
    """Create curved, straight and curved shapes with the factory and draw them."""
    shapes = [
        factory.create_curved(),
        factory.create_straight(),
        factory.create_curved(),
    ]
    logger.debug(f"{factory.__class__.__name__} created {shapes}")
    for shape in shapes:
        shape.draw()
    return shapes
