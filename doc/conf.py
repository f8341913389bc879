# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Project information -----------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#project-information


from datetime import date

import freelook

project = "FreeLook"
author = "FreeLook Developers"
copyright = f"{date.today().year}, {author}"
release = freelook.__version__
package = freelook.__name__

# -- General configuration ---------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#general-configuration

# If your documentation needs a minimal Sphinx version, state it here.
needs_sphinx = "5.0"

# The document name of the “root” document, that is, the document that contains
# the root toctree directive.
root_doc = "index"

# Add any Sphinx extension module names here, as strings. They can be
# extensions coming with Sphinx (named "sphinx.ext.*") or your custom
# ones.
extensions = [
    "myst_parser",
    "sphinx.ext.autodoc",
    "sphinx.ext.autosectionlabel",
    "sphinx.ext.autosummary",
    "sphinx.ext.intersphinx",
    "numpydoc",
    "sphinx_copybutton",
    "sphinx_design",
]

exclude_patterns = [
    "_build",
    "Thumbs.db",
    ".DS_Store",
    "README.md",      # symlinked from root, included inline via rst
    "../*.md",
]

templates_path = ["_templates"]

# Sphinx will warn about all references where the target cannot be found.
nitpicky = False
nitpick_ignore = []

# A list of ignored prefixes for module index sorting.
modindex_common_prefix = [f"{package}."]

# The name of a reST role (builtin or Sphinx extension) to use as the default
# role, that is, for text marked up `like this`. This can be set to 'py:obj' to
# make `filter` a cross-reference to the Python function “filter”.
default_role = "py:obj"

# -- Options for HTML output -------------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#options-for-html-output
html_theme = "furo"
html_static_path = ["_static"]
html_title = project
html_show_sphinx = False

# -- autosummary -------------------------------------------------------------
autosummary_generate = False

# -- autodoc -----------------------------------------------------------------
autodoc_typehints = "none"
autodoc_member_order = "groupwise"
autodoc_warningiserror = True
autoclass_content = "class"

# -- intersphinx -------------------------------------------------------------
intersphinx_mapping = {
    "numpy": ("https://numpy.org/doc/stable", None),
    "python": ("https://docs.python.org/3", None),
    "pyrr": ("https://pyrr.readthedocs.io/en/latest/", None),
}
intersphinx_timeout = 5

# -- autosectionlabels -------------------------------------------------------
autosectionlabel_prefix_document = True

# -- numpydoc ----------------------------------------------------------------
numpydoc_attributes_as_param_list = False  # dataclass fields go to Attributes, not Parameters
numpydoc_show_class_members = False

# x-ref
numpydoc_xref_param_type = True
numpydoc_xref_aliases = {
    # Python
    "bool": ":class:`python:bool`",
    # FreeLook
    "Matrix": "freelook.algebra.matrix.Matrix",
    "Vector": "freelook.algebra.vector.Vector",
    "Vector2": "freelook.algebra.vector.Vector2",
    "Vector3": "freelook.algebra.vector.Vector3",
    "Vector4": "freelook.algebra.vector.Vector4",
    "Quaternion": "freelook.algebra.quaternion.Quaternion",
    "Camera": "freelook.gl.camera.Camera",
}

# validation
# https://numpydoc.readthedocs.io/en/latest/validation.html#validation-checks
error_ignores = {
    "GL01",  # docstring should start in the line immediately after the quotes
    "EX01",  # section 'Examples' not found
    "ES01",  # no extended summary found
    "SA01",  # section 'See Also' not found
    "RT02",  # The first line of the Returns section should contain only the type, unless multiple values are being returned  # noqa
}
numpydoc_validate = True
numpydoc_validation_checks = {"all"} | set(error_ignores)
numpydoc_validation_exclude = {  # regex to ignore during docstring check
    r"\.__getitem__",
    r"\.__hash__",
    r"\.__mul__",
    r"\.__rmul__",
    r"\.__matmul__",
    r"\.__sub__",
    r"\.__add__",
    r"\.__iter__",
    r"\.__len__",
    r"\.__truediv__",
    r"\.__neg__",
    r"\.__eq__",
}

