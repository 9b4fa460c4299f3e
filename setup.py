from setuptools import setup

setup(name='istrings',
      version='1.0',
      description='Finds printable strings inside binary files, filtered by letter sequences',
      packages=['istrings', 'istrings.conf', 'istrings.lib', 'istrings.lib.common', 'istrings.lib.core',
                'istrings.lib.utils'],
      install_requires=['python-magic', 'pendulum'],
      extras_require={'test': ['pytest']},
      zip_safe=False,
      entry_points={
            'console_scripts': ['istrings=istrings.main:main'],
      }
      )
