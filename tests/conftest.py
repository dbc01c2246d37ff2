import logging

from pytest import fixture


@fixture(autouse=True)
def restore_logging():
    # main() reconfigures the root logger with force=True
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    main_level = logging.getLogger('main').level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger('main').setLevel(main_level)
    logging.getLogger('sortedstack.core.sorted_stack').setLevel(logging.NOTSET)
