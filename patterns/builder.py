"""
Builder pattern: a director assembles a pizza through a builder, step by step.

The same construction sequence (``Cook.make_pizza``) produces different
pizzas depending on which builder it is handed.
"""
from abc import ABC, abstractmethod
from typing import Optional
from utils.logging_config import get_logger
from utils.exceptions import BuildError
from .factory import register_builder

logger = get_logger(__name__)


class Pizza:
    """The product: three string attributes set one at a time."""

    def __init__(self):
        self.dough = ""
        self.sauce = ""
        self.topping = ""

    def set_dough(self, dough: str):
        self.dough = dough

    def set_sauce(self, sauce: str):
        self.sauce = sauce

    def set_topping(self, topping: str):
        self.topping = topping

    def describe(self) -> str:
        return (
            f"Pizza with {self.dough} dough, {self.sauce} sauce and "
            f"{self.topping} topping. Mmm."
        )

    def open(self):
        """Print the pizza description."""
        print(self.describe())

    def __repr__(self):
        return (
            f"Pizza(dough={self.dough!r}, sauce={self.sauce!r}, "
            f"topping={self.topping!r})"
        )


class PizzaBuilder(ABC):
    """Abstract builder that owns the pizza under construction."""

    def __init__(self):
        self._pizza: Optional[Pizza] = None
        self.logger = get_logger(self.__class__.__name__)

    def create_new_pizza_product(self):
        """Start a fresh pizza, discarding any previous one."""
        self._pizza = Pizza()
        self.logger.debug("Created new pizza product")

    def get_pizza(self) -> Pizza:
        """Return the pizza built so far."""
        return self._current()

    def _current(self) -> Pizza:
        if self._pizza is None:
            raise BuildError(
                f"{self.__class__.__name__} has no pizza; "
                "call create_new_pizza_product() first",
                details={'builder': self.__class__.__name__}
            )
        return self._pizza

    @abstractmethod
    def build_dough(self):
        """Set the dough of the current pizza."""
        pass

    @abstractmethod
    def build_sauce(self):
        """Set the sauce of the current pizza."""
        pass

    @abstractmethod
    def build_topping(self):
        """Set the topping of the current pizza."""
        pass


@register_builder('hawaiian')
class HawaiianPizzaBuilder(PizzaBuilder):

    def build_dough(self):
        self._current().set_dough("cross")

    def build_sauce(self):
        self._current().set_sauce("mild")

    def build_topping(self):
        self._current().set_topping("ham+pineapple")


@register_builder('spicy')
class SpicyPizzaBuilder(PizzaBuilder):

    def build_dough(self):
        self._current().set_dough("pan baked")

    def build_sauce(self):
        self._current().set_sauce("hot")

    def build_topping(self):
        self._current().set_topping("pepperoni+salami")


class Cook:
    """Director: runs the fixed build sequence on whichever builder it is given."""

    def __init__(self):
        self._pizza_builder: Optional[PizzaBuilder] = None
        self.logger = get_logger(self.__class__.__name__)

    def make_pizza(self, pizza_builder: PizzaBuilder) -> Pizza:
        """Build a pizza with the given builder and return it."""
        self._pizza_builder = pizza_builder
        pizza_builder.create_new_pizza_product()
        pizza_builder.build_dough()
        pizza_builder.build_sauce()
        pizza_builder.build_topping()
        self.logger.debug(f"Made pizza with {pizza_builder.__class__.__name__}")
        return pizza_builder.get_pizza()

    def open_pizza(self):
        """Display the pizza of the most recently used builder."""
        if self._pizza_builder is None:
            raise BuildError("Cook has no builder; call make_pizza() first")
        self._pizza_builder.get_pizza().open()
