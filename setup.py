import glob
import os

from setuptools import find_packages, setup

top_level_modules = [
    os.path.splitext(os.path.basename(p))[0]
    for p in glob.glob('src/*.py')
]

setup(
    name='objdb',
    version='0.1.0',
    packages=find_packages(where='src', exclude=['tests', 'tests.*']),
    package_dir={'': 'src'},
    py_modules=top_level_modules,
    include_package_data=True,
    python_requires='>=3.10',
    install_requires=[
        'redis>=4.5',
        'pydantic>=2.0',
        'loguru>=0.7',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': ['objdb=main:main'],
    },
    description='Polymorphic object store on a key-value backend',
)
