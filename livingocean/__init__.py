"""Grid-based ocean ecosystem simulation of algae, herbivore fish and predator fish, shown as text."""

__version__ = "0.1.0"