"""Setup script for the OSC message builder."""

from setuptools import setup, find_packages


requires = [
    "click>=6.2",
    "colorlog>=2.6.0",
    "python-dotenv>=0.10.3",
]

__version__ = None
exec(open("src/oscmsg/version.py").read())

setup(
    name="osc-message-builder",
    version=__version__,
    description="Textual OSC messages with type tags from arbitrarily nested data",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=requires,
    extras_require={"test": ["pytest>=6.0"]},
    setup_requires=[],
    entry_points={"console_scripts": ["oscmsg = oscmsg.launcher:start"]},
)
