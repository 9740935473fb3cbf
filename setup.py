from setuptools import setup, find_packages
import pathlib

here = pathlib.Path(__file__).parent.resolve()
long_description = (here / 'README.md').read_text(encoding='utf-8')


setup(
    name='splitwatch',
    version='0.0.1',
    description='Cumulative stop-watch on a monotonic clock, with unit conversion and simple benchmarking',
    long_description=long_description,
    long_description_content_type='text/markdown',

    package_dir={'': 'src'},
    packages=find_packages(where='src'),  # Required
    python_requires='>=3.7, <4',
    install_requires=['numpy', 'matplotlib', 'uncertainties', 'progressbar'],
    extras_require={'test': ['pytest']},
)
