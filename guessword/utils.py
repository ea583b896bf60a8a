import logging


class dotdict(dict):
    """dot.notation access to dictionary attributes"""
    __getattr__ = lambda self, key: self[key]
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def setup_logging(verbose=False):
    logging.basicConfig(format="%(message)s", level=logging.DEBUG if verbose else logging.WARNING)
