from setuptools import setup

kwds = {'name': 'pyNURBSect',
        'version': '1.0',
        'packages': ['nurbsect',
                     'nurbsect.geometry', 'nurbsect.geometry.methods'],
        'install_requires': ['numpy', 'scipy'],
        'extras_require': {'test': ['pytest']},
        'author': 'trelau',
        'description': 'Python-based NURBS curve intersection library.',
        'license': 'BSD'}

setup(**kwds)
