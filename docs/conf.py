# Sphinx configuration file

import os
import sys
sys.path.insert(0, os.path.abspath('../src'))

from decision_workflow import __version__  # noqa: E402

project = 'Decision Workflow'
copyright = '2024, Decision Workflow contributors'
author = 'Decision Workflow contributors'
release = __version__

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx.ext.intersphinx',
    'sphinx_autodoc_typehints',
]

exclude_patterns = ['_build']

html_theme = 'sphinx_rtd_theme'

# Autodoc settings
autodoc_default_options = {
    'members': True,
    'member-order': 'groupwise',
    'show-inheritance': True,
}
autodoc_class_signature = 'separated'

# Napoleon settings
napoleon_google_docstring = True
napoleon_numpy_docstring = False

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'pydantic': ('https://docs.pydantic.dev/latest', None),
}
