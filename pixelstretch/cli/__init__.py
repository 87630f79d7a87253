"""
Command Line Interface for PixelStretch

Command line utilities to apply the stretch effect to image files without
writing Python scripts.

Available Commands:
- stretch: Load an image, stretch it and save the result (pxs-stretch)

Author: B.G.
"""

_CLI_SUBMODULES = {
    "stretch": (".stretch_commands", "stretch"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
