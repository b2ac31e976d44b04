import functools
import inspect
import logging
import time


TRACE_ENABLED = False
LOG = logging.getLogger("PHRASECLOCK")


def trace(*dec_args, **dec_kwargs):
    """Trace calls to the decorated function.

    This decorator should always be defined as the outermost decorator so it
    is defined last. This is important so it does not interfere
    with other decorators.

    Using this decorator on a function will cause its execution to be logged at
    `DEBUG` level with arguments, return values, and exceptions, once
    :func:`setup_tracing` has been called.

    :returns: a function decorator
    """

    def _decorator(f):

        func_name = f.__name__

        @functools.wraps(f)
        def trace_logging_wrapper(*args, **kwargs):
            filter_function = dec_kwargs.get("filter_function")

            # Don't bother going any further if DEBUG log level
            # is not enabled for the logger.
            if not TRACE_ENABLED or not LOG.isEnabledFor(logging.DEBUG):
                return f(*args, **kwargs)

            all_args = inspect.getcallargs(f, *args, **kwargs)
            pass_filter = filter_function is None or filter_function(all_args)

            if pass_filter:
                LOG.debug(
                    "==> %(func)s: call %(all_args)r",
                    {"func": func_name, "all_args": str(all_args)},
                )

            start_time = time.perf_counter()
            try:
                result = f(*args, **kwargs)
            except Exception as exc:
                total_time = (time.perf_counter() - start_time) * 1000
                LOG.debug(
                    "<== %(func)s: exception (%(time).3fms) %(exc)r",
                    {"func": func_name, "time": total_time, "exc": exc},
                )
                raise
            total_time = (time.perf_counter() - start_time) * 1000

            if pass_filter:
                LOG.debug(
                    "<== %(func)s: return (%(time).3fms) %(result)r",
                    {"func": func_name, "time": total_time, "result": result},
                )
            return result

        return trace_logging_wrapper

    if len(dec_args) == 0:
        # filter_function is passed and args does not contain f
        return _decorator
    else:
        # filter_function is not passed
        return _decorator(dec_args[0])


def setup_tracing(enabled=True):
    """Turn the trace decorator on (or back off)."""
    global TRACE_ENABLED
    TRACE_ENABLED = bool(enabled)
