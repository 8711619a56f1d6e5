import setuptools

version = {}
with open('latchtrie/_version.py') as f:
    exec(f.read(), version)

setuptools.setup(
    name='latchtrie',
    version=version['__version__'],
    packages=['latchtrie'],
    python_requires='>=3.7.0',
    install_requires=['sortedcontainers'],
    extras_require={
        'test': ['pytest', 'numpy'],
    },
)
