class ConfigurationError(Exception):
    """Exception raised when a type hierarchy is declared or registered incorrectly.
    These are programmer/setup mistakes and are raised at registration time, before any value is resolved."""
    
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)
