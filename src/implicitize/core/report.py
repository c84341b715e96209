from functools import wraps
import logging
import threading
import time

# Nesting depth of reported calls, separate for every thread.
__report_state = threading.local()

def report(fn):
    """
    Log the duration of the decorated function call at debug level.
    Nested reported calls are indented.
    """
    @wraps(fn)
    def do_report(*args, **kwargs):
        state = __report_state
        level = getattr(state, 'indent_level', 0)
        state.indent_level = level + 1
        init_time = time.perf_counter()
        try:
            result = fn(*args, **kwargs)
        finally:
            state.indent_level = level
        duration = time.perf_counter() - init_time
        indent = (level * 2) * " "
        logging.debug(f"{indent}DONE {fn.__module__}.{fn.__name__} @ {duration}")
        return result
    return do_report
