"""Tests for the builder pattern demo."""
import pytest
from patterns import (
    BuilderFactory,
    Cook,
    HawaiianPizzaBuilder,
    SpicyPizzaBuilder,
    Pizza
)
from utils.exceptions import BuildError, ConfigurationError


class TestPizza:
    """Tests for the pizza product."""

    def test_mutators(self):
        pizza = Pizza()
        pizza.set_dough("thin")
        pizza.set_sauce("tomato")
        pizza.set_topping("basil")

        assert (pizza.dough, pizza.sauce, pizza.topping) == ("thin", "tomato", "basil")

    def test_open_prints_description(self, capsys):
        pizza = Pizza()
        pizza.set_dough("cross")
        pizza.set_sauce("mild")
        pizza.set_topping("ham+pineapple")
        pizza.open()

        out = capsys.readouterr().out
        assert out == "Pizza with cross dough, mild sauce and ham+pineapple topping. Mmm.\n"


class TestPizzaBuilders:
    """Tests for concrete builders and the cook."""

    def test_hawaiian(self):
        pizza = Cook().make_pizza(HawaiianPizzaBuilder())
        assert (pizza.dough, pizza.sauce, pizza.topping) == ("cross", "mild", "ham+pineapple")

    def test_spicy(self):
        pizza = Cook().make_pizza(SpicyPizzaBuilder())
        assert (pizza.dough, pizza.sauce, pizza.topping) == ("pan baked", "hot", "pepperoni+salami")

    def test_build_twice_gives_independent_pizzas(self):
        cook = Cook()
        builder = HawaiianPizzaBuilder()

        first = cook.make_pizza(builder)
        second = cook.make_pizza(builder)

        assert first is not second
        assert vars(first) == vars(second)

        second.set_topping("cheese")
        assert first.topping == "ham+pineapple"

    def test_open_pizza_uses_last_builder(self, capsys):
        cook = Cook()
        cook.make_pizza(HawaiianPizzaBuilder())
        cook.make_pizza(SpicyPizzaBuilder())
        cook.open_pizza()

        out = capsys.readouterr().out
        assert out == "Pizza with pan baked dough, hot sauce and pepperoni+salami topping. Mmm.\n"

    def test_get_pizza_before_create_raises(self):
        with pytest.raises(BuildError):
            SpicyPizzaBuilder().get_pizza()

    def test_build_step_before_create_raises(self):
        with pytest.raises(BuildError) as exc_info:
            HawaiianPizzaBuilder().build_dough()
        assert exc_info.value.details['builder'] == 'HawaiianPizzaBuilder'

    def test_open_pizza_without_builder_raises(self):
        with pytest.raises(BuildError):
            Cook().open_pizza()


class TestBuilderFactory:
    """Tests for builder registration."""

    def test_registered_variants(self):
        assert set(BuilderFactory.list_available()) >= {'hawaiian', 'spicy'}
        assert isinstance(BuilderFactory.create('spicy'), SpicyPizzaBuilder)

    def test_unknown_variant(self):
        with pytest.raises(ConfigurationError) as exc_info:
            BuilderFactory.create('margherita')
        assert 'hawaiian' in exc_info.value.details['available_types']
