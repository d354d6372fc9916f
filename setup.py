from setuptools import setup, find_packages
setup(
    name='flupcas',
    version='0.3',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.6',
    install_requires=[
        'requests>=2.20.0',
    ],
    extras_require={
        'test': ['pytest>=6.0'],
    },

    author='Allan Saddi',
    author_email='allan@saddi.com',
    description='CAS ticket validation client for WSGI applications'
)
