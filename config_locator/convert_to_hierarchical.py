"""Logic for promoting configurations to a hierarchical representation."""

from typing import Any

from config_locator.configuration import ConfigurationKind
from config_locator.expression_engine import DefaultExpressionEngine
from config_locator.hierarchical_configuration import HierarchicalConfiguration
from config_locator.merge import append


def convert_to_hierarchical(
    conf: Any, engine: DefaultExpressionEngine | None = None
) -> HierarchicalConfiguration | None:
    """Return a hierarchical view of a configuration.

    A hierarchical configuration is returned as-is; if an engine is given it
    is installed on that instance. Any other configuration is appended to a
    new hierarchical configuration with key splitting turned off, so each
    flat key becomes a single top-level node. None yields None.
    """
    if conf is None:
        return None

    match conf.kind:
        case ConfigurationKind.HIERARCHICAL:
            if engine is not None:
                conf.expression_engine = engine
            return conf
        case ConfigurationKind.FLAT:
            hc = HierarchicalConfiguration(engine)
            parsing_disabled = hc.delimiter_parsing_disabled
            hc.delimiter_parsing_disabled = True
            try:
                append(conf, hc)
            finally:
                hc.delimiter_parsing_disabled = parsing_disabled
            return hc

    msg = f"Unsupported configuration kind: {conf.kind!r}"
    raise TypeError(msg)
