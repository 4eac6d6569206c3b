"""frontkick: bootstrap a front-end project, its git repository and its GitHub remote."""

__version__ = "1.0.0"
