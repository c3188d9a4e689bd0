"""
Exception classes with built-in guidance for client configuration.
"""
import sys


class ConfigException(Exception):
    """Base exception for all configuration errors."""
    def __init__(self, message: str, error_type: str = None, variable_name: str = None,
                 config_file: str = None):
        super().__init__(message)
        self.error_type = error_type
        self.variable_name = variable_name
        self.config_file = config_file
        self.guidance = self._generate_guidance()

    def _get_current_command(self):
        """Get the current command being executed."""
        if len(sys.argv) > 0:
            executable = sys.argv[0].split('/')[-1]
            args = sys.argv[1:]
            if args:
                return f"{executable} {' '.join(args)}"
            else:
                return executable
        return "unknown command"

    def _generate_guidance(self):
        """Override in subclasses to provide specific guidance."""
        return f"""
❌ Configuration error: {self}
💡 Check your configuration and try again
"""


class ApiKeyRequiredException(ConfigException):
    """Raised when no lob.com API key can be found."""
    def __init__(self, message: str, variable_name: str = "LOB_API_KEY", **kwargs):
        super().__init__(message, error_type="api_key_required", variable_name=variable_name, **kwargs)

    def _generate_guidance(self):
        command = self._get_current_command()
        source = f" or add 'api-key' to {self.config_file}" if self.config_file else ""
        return f"""
❌ A lob.com API key is required
💡 Resolve this in one of the following ways:
   1. Set the environment variable: export {self.variable_name}=test_xxxxxxxx{source}
   2. Or point at a config file: {command} --config=lob.yaml
"""


class ConfigFileNotFoundException(ConfigException):
    """Raised when an explicitly requested config file does not exist."""
    def __init__(self, message: str, config_file: str, **kwargs):
        super().__init__(message, error_type="config_file_not_found", config_file=config_file, **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Config file '{self.config_file}' not found
💡 Create it with at least the following content:
   api-key: test_xxxxxxxx
"""


class InvalidConfigFileException(ConfigException):
    """Raised when a config file is not a YAML mapping."""
    def __init__(self, message: str, config_file: str, **kwargs):
        super().__init__(message, error_type="invalid_config_file", config_file=config_file, **kwargs)

    def _generate_guidance(self):
        return f"""
❌ Config file '{self.config_file}' could not be read: {self}
💡 The file must be a YAML mapping, for example:
   api-key: test_xxxxxxxx
   base-api: https://api.lob.com/v1/
   api-version: "2016-06-30"
"""
