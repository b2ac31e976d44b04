"""
Single point of entry to generate the sample configuration file.

This module collects all the necessary info from the other modules in this
package.  The sample-config command and the oslo-config-generator find it
through the 'oslo.config.opts' entry point.
"""

import collections
import importlib
import os
import pkgutil


LIST_OPTS_FUNC_NAME = 'list_opts'
IGNORED_MODULES = ('opts',)


def _tupleize(dct):
    """Take the dict of options and convert to the 2-tuple format."""
    return [(key, val) for key, val in dct.items()]


def list_opts():
    opts = collections.defaultdict(list)
    module_names = _list_module_names()
    imported_modules = _import_modules(module_names)
    _append_config_options(imported_modules, opts)
    return _tupleize(opts)


def _list_module_names():
    module_names = []
    package_path = os.path.dirname(os.path.abspath(__file__))
    for _, modname, ispkg in pkgutil.iter_modules(path=[package_path]):
        if modname in IGNORED_MODULES or ispkg:
            continue
        module_names.append(modname)
    return module_names


def _import_modules(module_names):
    imported_modules = []
    for modname in module_names:
        mod = importlib.import_module('phraseclock.conf.' + modname)
        if not hasattr(mod, LIST_OPTS_FUNC_NAME):
            msg = (
                "The module 'phraseclock.conf.%s' should have a '%s' "
                'function which returns the config options.'
                % (modname, LIST_OPTS_FUNC_NAME)
            )
            raise Exception(msg)
        imported_modules.append(mod)
    return imported_modules


def _append_config_options(imported_modules, config_options):
    for mod in imported_modules:
        configs = mod.list_opts()
        for key, val in configs.items():
            config_options[key].extend(val)
