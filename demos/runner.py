"""Driver that runs the Builder, Factory Method and Abstract Factory demos in order."""
import sys
from typing import Iterable, List, Optional, Tuple

from config import ConfigManager
from patterns import (
    BuilderFactory,
    ShapeFactoryRegistry,
    Cook,
    MyApplication,
    Pizza,
    Document,
    Shape,
    draw_shapes,
    DEFAULT_CAPACITY
)
from utils import ErrorContext, LogContext, LoggerFactory, get_logger, handle_errors

logger = get_logger(__name__)

BUILDER_BANNER = "\n----------------BUILDER ---------------------------"
FACTORY_METHOD_BANNER = "\n----------------FACTORY METHOD ---------------------------"
ABSTRACT_FACTORY_BANNER = "\n----------------ABSTRACT FACTORY ---------------------------"


def run_builder_demo(variants: Iterable[str] = ('hawaiian', 'spicy')) -> List[Pizza]:
    """Have one cook make and open a pizza with each named builder."""
    print(BUILDER_BANNER)
    cook = Cook()
    builders = [BuilderFactory.create(name) for name in variants]

    pizzas = []
    for builder in builders:
        pizzas.append(cook.make_pizza(builder))
        cook.open_pizza()
    return pizzas


def run_factory_method_demo(
    names: Iterable[str] = ('foo', 'bar'),
    capacity: Optional[int] = DEFAULT_CAPACITY
) -> Tuple[Document, ...]:
    """Register the named documents with a MyApplication and report them."""
    print(FACTORY_METHOD_BANNER)
    app = MyApplication(capacity=capacity)

    for name in names:
        app.new_document(name)
    app.report_docs()
    return app.documents


def run_abstract_factory_demo(variant: str = 'simple') -> List[Shape]:
    """Draw curved, straight and curved shapes from the named factory family."""
    print(ABSTRACT_FACTORY_BANNER)
    factory = ShapeFactoryRegistry.create(variant)
    return draw_shapes(factory)


def load_settings(config_path: Optional[str] = None) -> ConfigManager:
    """Build the configuration from defaults, an optional file and the environment."""
    manager = ConfigManager()
    if config_path:
        manager.load_from_file(config_path)
    manager.load_from_env()
    return manager


def run_all(manager: ConfigManager):
    demos = [
        ('builder', lambda: run_builder_demo(manager.get_list('builder.variants'))),
        ('factory_method', lambda: run_factory_method_demo(
            manager.get_list('application.documents'),
            capacity=manager.get('application.capacity')
        )),
        ('abstract_factory', lambda: run_abstract_factory_demo(manager.get('factory.variant'))),
    ]

    # Failures are logged once, by main()
    for name, demo in demos:
        with LogContext(logger, demo=name), ErrorContext(f"{name} demo", log_errors=False):
            demo()


@handle_errors(default_return=1)
def main(config_path: Optional[str] = None) -> int:
    """Run every demo; returns a process exit code."""
    manager = load_settings(config_path)
    LoggerFactory.configure(
        log_level=manager.get('logging.level', 'WARNING'),
        enable_structured=manager.get('logging.structured', False),
        force=True
    )
    run_all(manager)
    return 0


def cli():
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))


if __name__ == "__main__":
    cli()
