from setuptools import setup, find_packages

setup(
    name='pineconer',
    version='0.1.0',
    author='pineconer developers',
    description='A thin Python client for the Pinecone vector database HTTP API.',
    license='MIT',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'requests',
        'python-dateutil',
        'python-dotenv',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires=">=3.10"
)
