"""A declarative command-line argument parser. Describe a command's
parameters and options once, get typed values or a precise usage error
back.
"""

from setuptools import setup


__author__ = 'Clime contributors'
__version__ = '0.1.0'
__url__ = 'https://github.com/clime-py/clime'
__license__ = 'BSD'


setup(name='clime',
      version=__version__,
      description="A declarative command-line argument parser with exact, user-facing usage errors.",
      long_description=__doc__,
      author=__author__,
      url=__url__,
      packages=['clime', 'clime.test'],
      include_package_data=True,
      zip_safe=False,
      license=__license__,
      platforms='any',
      python_requires='>=3.7',
      install_requires=['boltons>=20.0.0'],
      extras_require={'test': ['pytest']},
      classifiers=[
          'Topic :: Utilities',
          'Intended Audience :: Developers',
          'Topic :: Software Development :: Libraries',
          'Programming Language :: Python :: 3.7',
          'Programming Language :: Python :: 3.8',
          'Programming Language :: Python :: 3.9',
          'Programming Language :: Python :: 3.10',
          'Programming Language :: Python :: 3.11',
          'Programming Language :: Python :: 3.12',
          'Programming Language :: Python :: 3 :: Only',
          'Programming Language :: Python :: Implementation :: CPython',
          'Programming Language :: Python :: Implementation :: PyPy', ]
      )

"""
Releasing:

* pytest
* bump __version__ above and tag vx.y.z
* python setup.py sdist bdist_wheel
* twine upload dist/*

"""
