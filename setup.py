from setuptools import setup, find_packages

setup(name='crpmm',
    version='0.0',
    description='Collapsed Gibbs sampling for Chinese restaurant process mixtures of documents.',
    packages=find_packages(include=['crpmm', 'crpmm.*']),
    package_dir={'crpmm': 'crpmm'},
    install_requires=['matplotlib',
                      'numpy',
                      'scipy',
                      'tqdm'],
    extras_require={'test': ['pytest']}
    )
