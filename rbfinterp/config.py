"""Stores global `rbfinterp` configuration and provides an interface to interact with it.

The following options are currently available:

default_kernel : str, defaults to "thin_plate"
    A kernel used by `RBFInterpolator` if `kernel` is not passed explicitly.
default_smoothing : float, defaults to 0
    A smoothing parameter used by `RBFInterpolator` if `smoothing` is not passed explicitly.
warn_unused_epsilon : bool, defaults to True
    Whether to warn if a shape parameter is explicitly passed to a kernel which does not depend on it.

All options can be accessed and updated via `config` variable available directly from the global `rbfinterp`
namespace.

Examples
--------
Display the current config state:
>>> from rbfinterp import config
>>> print(config)
{'default_kernel': 'thin_plate', 'default_smoothing': 0.0, 'warn_unused_epsilon': True}

Update config option globally:
>>> config["default_kernel"] = "gaussian"
>>> print(config["default_kernel"])
gaussian

Reset an option to its default value:
>>> config.reset_options("default_kernel")
>>> print(config["default_kernel"])
thin_plate

Temporarily change given options within a context manager:
>>> with config.use_options(default_smoothing=0.1):
>>>     print(config["default_smoothing"])
>>> print(config["default_smoothing"])
0.1
0.0
"""

from contextlib import contextmanager


class Config:
    """Store global `rbfinterp` configuration and provide an interface to interact with it."""

    def __init__(self):
        self.default_options = {
            "default_kernel": "thin_plate",
            "default_smoothing": 0.0,
            "warn_unused_epsilon": True,
        }
        self.options = self.default_options.copy()

    def __repr__(self):
        """String representation of the current config state."""
        return repr(self.options)

    def __getitem__(self, option):
        """Get current option value."""
        return self.options[option]

    def __setitem__(self, option, value):
        """Set a new option value."""
        self.options[option] = value

    def reset_options(self, *options):
        """Reset given options to their default values."""
        for option in options:
            if option in self.default_options:
                self.options[option] = self.default_options[option]
            else:
                _ = self.options.pop(option, None)

    @contextmanager
    def use_options(self, **options):
        """Enter a context manager that temporarily changes given options and reverts them back upon exit, even if an
        exception was raised inside the context."""
        missing = object()
        prev_options = {option: self.options.get(option, missing) for option in options}
        self.options.update(options)
        try:
            yield
        finally:
            for option, value in prev_options.items():
                if value is missing:
                    _ = self.options.pop(option, None)
                else:
                    self.options[option] = value


config = Config()
