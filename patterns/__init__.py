"""
Creational design patterns: Builder, Factory Method and Abstract Factory.
"""
from .factory import (
    Factory,
    BuilderFactory,
    ShapeFactoryRegistry,
    register_builder,
    register_shape_factory
)
from .builder import (
    Pizza,
    PizzaBuilder,
    HawaiianPizzaBuilder,
    SpicyPizzaBuilder,
    Cook
)
from .factory_method import (
    DEFAULT_CAPACITY,
    Document,
    MyDocument,
    DocumentRegistry,
    Application,
    MyApplication
)
from .abstract_factory import (
    IdSequence,
    get_shape_ids,
    Shape,
    Circle,
    Square,
    Ellipse,
    Rectangle,
    ShapeFactory,
    SimpleShapeFactory,
    RobustShapeFactory,
    draw_shapes
)

__all__ = [
    'Factory',
    'BuilderFactory',
    'ShapeFactoryRegistry',
    'register_builder',
    'register_shape_factory',
    'Pizza',
    'PizzaBuilder',
    'HawaiianPizzaBuilder',
    'SpicyPizzaBuilder',
    'Cook',
    'DEFAULT_CAPACITY',
    'Document',
    'MyDocument',
    'DocumentRegistry',
    'Application',
    'MyApplication',
    'IdSequence',
    'get_shape_ids',
    'Shape',
    'Circle',
    'Square',
    'Ellipse',
    'Rectangle',
    'ShapeFactory',
    'SimpleShapeFactory',
    'RobustShapeFactory',
    'draw_shapes',
]
