from setuptools import setup, find_packages

setup(
    name='firegrid',
    version='0.1',
    packages=find_packages(),
    install_requires=[
        'numpy',
        'pandas',
        'tqdm',
        'pyarrow',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
            'pytest-cov>=4.0',
            'ruff>=0.1.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'firegrid=firegrid.sim_runner:main',
        ],
    },
    python_requires='>=3.9',
)
