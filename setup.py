from pathlib import Path

from setuptools import setup

root_dir = Path(__file__).parent
with open(root_dir / "README.md") as f:
    readme = f.read()

extras_require = {
    "dev": ["pytest", "nox", "ruff", "mypy", "atheris"],
    "bench": ["pytest-benchmark"],
    "image": ["Pillow"],
}

setup(
    name="tgaminer",
    version="0.1.0",
    packages=["tgaminer"],
    package_data={"tgaminer": ["py.typed"]},
    install_requires=[],
    extras_require=extras_require,
    description="Truevision TGA image decoder",
    long_description=readme,
    long_description_content_type="text/markdown",
    license="MIT",
    scripts=[
        "tools/dumptga.py",
        "tools/tga2img.py",
    ],
    keywords=[
        "tga",
        "targa",
        "image decoder",
        "run-length encoding",
    ],
    python_requires=">=3.10",
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: 3 :: Only",
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    ],
)
