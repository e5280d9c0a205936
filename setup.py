"""
Subway Routing - Build Script

This script installs the subway_routing package and its command line entry point.
"""

from setuptools import setup, find_packages


setup(
    name='subway-routing',
    version='1.0.0',
    author='Subway Routing Team',
    description='Fewest-stations subway routing over a line-definition map',
    long_description='''
    Builds a subway network from a line-definition file and finds, for any two
    stations, the route visiting the fewest stations (fewest transfers on ties).
    Lists the stations of a line or dumps best routes for every station pair.
    ''',
    packages=find_packages(include=['subway_routing', 'subway_routing.*']),
    install_requires=[
        'python-dotenv>=1.0.0',
        'pydantic>=2.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
            'pytest-mock>=3.10.0',
            'pytest-cov>=4.0.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'subway-routing=subway_routing.main:run',
        ],
    },
    zip_safe=False,
    python_requires='>=3.10',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: GIS',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
