from setuptools import find_packages, setup

setup(
    name="compilesoy",
    version="1.0.0",
    description="Render .soy templates to HTML or compile them to JavaScript",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=["Jinja2>=3.1"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["compilesoy = compilesoy.cli:main"]},
)
