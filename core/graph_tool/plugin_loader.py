"""
    Visualizer discovery through package entry points.

    Any installed distribution can add a renderer by declaring an entry
    point in the ``graph_tool.visualizer`` group that names a
    ``VisualizerPlugin`` subclass.  Discovery is lazy and runs once per
    loader; ``GraphTool.use_visualizer`` and the CLI ``visualizer``
    command read from it.
"""
import importlib.metadata
import logging
from typing import Dict, Generic, List, Optional, Type, TypeVar

from api.api.plugins.base import VisualizerPlugin

logger = logging.getLogger(__name__)

TPlugin = TypeVar('TPlugin')

# Entry-point group name (must match setup.py / pyproject.toml)
VISUALIZER_EP_GROUP = 'graph_tool.visualizer'


class PluginLoader(Generic[TPlugin]):
    """
    Instantiates every class registered under ``group`` that subclasses
    ``base``.  Entry points that fail to import, or that name something
    else, are logged and skipped.
    """

    def __init__(self, base: Type[TPlugin], group: str):
        self._base = base
        self._group = group
        self._plugins: Optional[Dict[str, TPlugin]] = None

    def _discover(self) -> Dict[str, TPlugin]:
        if self._plugins is not None:
            return self._plugins

        found: Dict[str, TPlugin] = {}
        for ep in importlib.metadata.entry_points(group=self._group):
            try:
                plugin_cls = ep.load()
            except (ImportError, AttributeError) as exc:
                logger.error("Failed to load plugin '%s': %s", ep.name, exc)
                continue

            if not (isinstance(plugin_cls, type) and issubclass(plugin_cls, self._base)):
                logger.warning("Plugin '%s' does not subclass %s; skipped.",
                               ep.name, self._base.__name__)
                continue

            found[ep.name] = plugin_cls()
            logger.info("Loaded visualizer '%s' (%s)", ep.name, plugin_cls.__name__)

        self._plugins = found
        return found

    def get(self, name: str) -> Optional[TPlugin]:
        """The plugin registered as ``name``, or None."""
        return self._discover().get(name)

    def get_names(self) -> List[str]:
        return sorted(self._discover())


def create_visualizer_loader() -> PluginLoader[VisualizerPlugin]:
    return PluginLoader(VisualizerPlugin, VISUALIZER_EP_GROUP)
