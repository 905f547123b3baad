# To install locally: pip install .
#
# To push a version through to pip.
#  - Make sure it installs correctly locally as above
#  - Update the version information in this file
# With twine:
#  - python setup.py sdist
#  - twine upload dist/*


from setuptools import setup, find_packages

from os import path
import io

# in development set version to none and ...
PYPI_VERSION = "1.0"  # Note: don't add any dashes if you want to use conda, use b1 not .b1


this_directory = path.abspath(path.dirname(__file__))
with io.open(path.join(this_directory, "README.md"), encoding="utf-8") as f:
    long_description = f.read()


if __name__ == "__main__":
    setup(
        name="gmtfigures",
        version=PYPI_VERSION,
        description="Render GMT map figures, such as a Lambert Conic Conformal map of North America, from Python",
        long_description=long_description,
        long_description_content_type="text/markdown",
        python_requires=">=3.8",
        install_requires=[
            "pygmt",
            "pyyaml",
        ],
        extras_require={
            "test": ["pytest"],
        },
        packages=find_packages(include=["gmtfigures", "gmtfigures.*"]),
        package_data={"gmtfigures": ["logging_config.yaml"]},
        include_package_data=True,
        entry_points={
            "console_scripts": ["gmtfigures = gmtfigures.__main__:main"],
        },
        classifiers=[
            "Programming Language :: Python :: 3",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
        ],
    )
