import functools
import os

DEBUG_ENABLED = os.environ.get('HARMONY_DEBUG', '').strip().lower() in ('1', 'true', 'yes', 'on')
DEBUG_DEPTH = 0


def trace(message: str):
    if DEBUG_ENABLED:
        print(f"{'  ' * DEBUG_DEPTH}{message}")


# debug decorator
def debug(func):
    if not DEBUG_ENABLED:
        return func

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        global DEBUG_DEPTH
        saved_depth = DEBUG_DEPTH
        prefix = '  ' * DEBUG_DEPTH
        print(f"{prefix}{func.__qualname__}({', '.join(repr(x) for x in args)}, {kwargs}) {{")
        exception = None
        result = None
        try:
            DEBUG_DEPTH += 1
            result = func(*args, **kwargs)
            return result
        except Exception as e:
            exception = e
            raise
        finally:
            if exception is not None:
                print(f"{prefix}}}raise {exception!r}")
            else:
                print(f"{'  ' * DEBUG_DEPTH}return {result!r}")
            DEBUG_DEPTH -= 1
            assert saved_depth == DEBUG_DEPTH
            print(f"{prefix}}}")
    return wrapper
