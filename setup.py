import setuptools

setuptools.setup(
    name="seekparsec",
    version="0.1.0",
    license="MIT License",
    description="Parser combinators over a seekable token cursor",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=["typing_extensions"],
    extras_require={"test": ["pytest", "hypothesis"]},
    zip_safe=False,
)
