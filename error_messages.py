# error_messages.py
"""
Error message definitions and exception types for the week view engine.
Keeps error codes and recovery hints in one place for the host application.
"""

class ErrorMessages:
    """Centralized error message definitions with recovery suggestions."""

    # Configuration Errors
    NO_EVENT_LOADER = {
        'title': 'Event Loader Missing',
        'message': 'No event loader or month change listener was provided. '
                   'It is required to load events for the visible days.',
        'suggestions': [
            'Call set_event_loader() before the first layout pass',
            'Use preview mode when no data source is available'
        ],
        'code': 'CONFIG_001'
    }

    INVALID_CONFIGURATION = {
        'title': 'Invalid Configuration',
        'message': 'The week view configuration contains invalid values.',
        'suggestions': [
            'min_hour must be an integer between 0 and 23',
            'max_hour must be greater than min_hour and at most 24',
            'Delete the settings file to fall back to defaults'
        ],
        'code': 'CONFIG_002'
    }

    # Loading Errors
    EVENT_LOAD_FAILED = {
        'title': 'Event Loading Failed',
        'message': 'The event loader failed while fetching a period.',
        'suggestions': [
            'The previously loaded events are kept',
            'Request a refresh to try again'
        ],
        'code': 'LOAD_001'
    }

    @staticmethod
    def format_suggestions(suggestions):
        """Format suggestion list for display."""
        if not suggestions:
            return ""

        if len(suggestions) == 1:
            return f"Suggestion: {suggestions[0]}"

        formatted = "Suggestions:\n"
        for i, suggestion in enumerate(suggestions, 1):
            formatted += f"{i}. {suggestion}\n"

        return formatted.strip()


class CalendarError(Exception):
    """Base exception class for calendar-specific errors."""

    def __init__(self, message, error_code=None, suggestions=None):
        super().__init__(message)
        self.error_code = error_code
        self.suggestions = suggestions or []

    @classmethod
    def from_template(cls, template, detail=None, **kwargs):
        """Build the exception from an ErrorMessages entry."""
        message = template['message']
        if detail:
            message = f"{message} ({detail})"
        return cls(message, error_code=template['code'],
                   suggestions=list(template['suggestions']), **kwargs)


class ConfigurationError(CalendarError):
    """Raised when a required collaborator was not supplied."""
    pass


class SettingsError(CalendarError):
    """Exception for settings and configuration values."""
    pass


class EventLoadError(CalendarError):
    """Raised when the event loader fails for a period."""

    def __init__(self, message, error_code=None, suggestions=None, period=None):
        super().__init__(message, error_code, suggestions)
        self.period = period
