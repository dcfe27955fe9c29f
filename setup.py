from setuptools import setup

setup(name='attrstr',
      version='0.0.1',
      description='strings with display attributes over byte ranges, rendered with ANSI escape codes',
      license='MIT',
      packages=['attrstr'],
      python_requires='>=3.6',
      install_requires=['pygments'],
      extras_require={'test': ['pyte']},
      zip_safe=False)
