# POSEUTILS: Utilities to decompose rigid-body transformation matrices

import setuptools

setuptools.setup(
      name='poseutils',
      version='0.1.0',
      description=(
            "A python package to decompose 3x4 rotation-translation "
            "matrices into Tait-Bryan (ZYX) Euler angles"
      ),
      package_dir={"": "src"},
      packages=setuptools.find_packages(where="src"),
      package_data={"poseutils": ["__init__.pyi"]},
      include_package_data=True,
      python_requires=">=3.10",
      install_requires=[
            "httpx>=0.24.0",
            "numpy>=1.23.5",
            "PyYAML>=6.0",
      ],
      extras_require={
            "tests": [
                  "pytest>=7.0",
                  "scipy>=1.8.0",
            ]
      },
      entry_points={
            "console_scripts": [
                  "decompose_matrix=poseutils.scripts.decompose_matrix:main",
            ]
      },
)
