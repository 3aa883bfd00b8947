from .configuration_error import ConfigurationError
from .resolution_error import ResolutionError
from .special_values import AUTO
