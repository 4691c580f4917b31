import logging

class NoExceptionFormatter(logging.Formatter):
    """
    Formatter that replaces the traceback of a record with the exception's
    one-line description.
    """
    def format(self, record):
        exc_info = record.exc_info
        exc_text = record.exc_text
        record.exc_info = None
        record.exc_text = None
        
        formatted = super().format(record)
        
        record.exc_info = exc_info
        record.exc_text = exc_text
        
        if exc_info and exc_info[1] is not None:
            error = exc_info[1]
            formatted += f' ({error.__class__.__name__}: {error})'
        
        return formatted
