from setuptools import setup, find_packages

setup(name="rtk", version=0.1, description="Ray tracing kit: homogeneous point/vector tuples",
      packages=find_packages(exclude=['test', 'test.*', '*.test', '*.test.*']),
      install_requires=['numpy', 'pyyaml'], extras_require={'test': ['pytest']}, python_requires='>=3.7')
