# -*- coding: utf-8 -*-
from setuptools import setup

packages = \
['nucleobase']

install_requires = \
[]

extras_require = \
{'numpy': ['numpy>=1.18'],
 'test': ['numpy>=1.18', 'pytest>=6.0']}

setup_kwargs = {
    'name': 'nucleobase',
    'version': '0.1.0',
    'description': 'Canonical representation of the five standard nucleobases and their classification',
    'long_description': "# nucleobase\nA closed enumeration of adenine, cytosine, guanine, thymine and uracil, shared by genomic-data libraries.\n\n    >>> from nucleobase import parse\n    >>> g = parse('g')\n    >>> g, g.is_purine(), g.is_ribonucleotide_base()\n    (<Nucleobase.GUANINE: 'G'>, True, True)\n\nUnrecognized codes raise ``nucleobase.UnrecognizedCode``, which keeps the rejected input on its ``code`` attribute.\n",
    'long_description_content_type': 'text/markdown',
    'packages': packages,
    'install_requires': install_requires,
    'extras_require': extras_require,
    'python_requires': '>=3.8,<4.0',
}

setup(**setup_kwargs)
