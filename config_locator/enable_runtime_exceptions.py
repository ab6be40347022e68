"""Opt-in escalation of reported configuration errors."""

from config_locator.configuration import ErrorReportingConfiguration


def enable_runtime_exceptions(config: object) -> None:
    """Make a configuration raise on every error it reports from now on.

    Configurations normally log and ignore errors met during property access.
    After this call such errors raise ``ConfigurationRuntimeError`` carrying
    the original exception.

    Raises:
        TypeError: If the configuration does not report errors.
    """
    if not isinstance(config, ErrorReportingConfiguration):
        msg = "Configuration must support error reporting"
        raise TypeError(msg)
    config.fail_fast = True
