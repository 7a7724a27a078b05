from setuptools import setup, find_packages

setup(name = "cubefractal",
      version = "0.1.0",
      description = "Menger sponge and Jeruzalem cube fractal mesh generator",
      keywords = "fractal menger mesh stl",
      license = "GPL",
      packages = find_packages(include=["cubefractal", "cubefractal.*"]),
      python_requires = ">=3.8",
      install_requires = [
        "numpy",
        "numpy-stl",
        "py-flags",
        "pillow",
        "matplotlib",
        ],
      extras_require = {
        "test": [
            "pytest",
            "hypothesis",
            "trimesh",
            ],
        },

      zip_safe = False,
      )
