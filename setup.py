import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="vector2",
    version="0.1.0",
    description="Simple and generic 2D vectors over any numeric scalar type",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license="BSD-3-Clause",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    keywords=['vector', '2d', 'geometry', 'game engine', 'linear algebra'],
    install_requires=[
        "numpy>=1.22.0",
        ],
    extras_require={
        'json': ["json_tricks>=3.12.1"],
        'test': ["pytest", "json_tricks>=3.12.1"],
    },
)
