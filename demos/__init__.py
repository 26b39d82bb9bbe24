"""
Runnable demonstrations of the creational patterns.
"""
from .runner import (
    run_builder_demo,
    run_factory_method_demo,
    run_abstract_factory_demo,
    load_settings,
    run_all,
    main
)

__all__ = [
    'run_builder_demo',
    'run_factory_method_demo',
    'run_abstract_factory_demo',
    'load_settings',
    'run_all',
    'main',
]
