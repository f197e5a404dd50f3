"""
Loading of kage snippets.

Snippets are looked up as ``context.name``, where the context selects a
registered loader. The ``builtinshader`` context serves the files in the
``builtinshader.kage`` package. A snippet may pull in another one with::

    {$ include 'builtinshader.samples_unsafe.kage' $}

The snippets carry no template variables, so a loaded snippet equals its
source text with the includes spliced in.
"""

import functools

import jinja2

root_loader = jinja2.PrefixLoader({}, delimiter=".")

jinja_env = jinja2.Environment(
    block_start_string="{$",
    block_end_string="$}",
    variable_start_string="{{",
    variable_end_string="}}",
    line_statement_prefix="$$",
    trim_blocks=True,  # an include line does not leave an extra newline
    keep_trailing_newline=True,
    undefined=jinja2.StrictUndefined,
    loader=root_loader,
)


def register_kage_loader(context, loader):
    """Make the snippets of a downstream package available under ``context``.

    Parameters
    ----------
    context : str
        The prefix of the snippet names, without dots.
    loader: jinja2.BaseLoader | callable | dict
        A jinja2 loader, a dict that maps names to kage code, or a function
        that takes a name and returns kage code.
    """
    if not (isinstance(context, str) and "." not in context):
        raise TypeError("Kage load context must be a string without dots.")
    if context in root_loader.mapping:
        raise RuntimeError(f"A kage loader is already registered for '{context}'.")
    if isinstance(loader, jinja2.BaseLoader):
        root_loader.mapping[context] = loader
    elif isinstance(loader, dict):
        root_loader.mapping[context] = jinja2.DictLoader(loader)
    elif callable(loader):
        root_loader.mapping[context] = jinja2.FunctionLoader(loader)
    else:
        raise TypeError(
            f"A kage loader must be a jinja2.BaseLoader, function, or dict. Not {loader!r}"
        )


register_kage_loader("builtinshader", jinja2.PackageLoader("builtinshader.kage", "."))


@functools.lru_cache(maxsize=None)
def load_kage(name, context="builtinshader"):
    """Load a kage snippet, with its includes resolved."""
    template = jinja_env.get_template(f"{context}.{name}")
    try:
        return template.render()
    except jinja2.UndefinedError as err:
        raise ValueError(f"Kage snippet '{context}.{name}': {err.args[0]}") from None
