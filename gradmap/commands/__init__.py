"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by gradmap.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary.
"""

# PyInstaller hidden imports; keep in sync with registry._COMMAND_MODULES
import gradmap.commands.apply as _apply  # noqa: F401
import gradmap.commands.lut as _lut  # noqa: F401
import gradmap.commands.presets as _presets  # noqa: F401
import gradmap.commands.preview as _preview  # noqa: F401
import gradmap.commands.share as _share  # noqa: F401
