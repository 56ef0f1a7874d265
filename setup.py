from setuptools import setup, find_packages

setup(
    name='genomemaker',
    version='0.1.0',
    description="Synthetic genome files and simulated sequencer reads.",
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.10',
    entry_points={
        'console_scripts': [
            'genomemaker=genomemaker.main:main',
        ],
    },
    install_requires=[
        'colorama>=0.4.6',
        'types-colorama',
        'pyyaml',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
