from setuptools import setup
import os

def get_grib2decode_version():
    """Get the grib2decode version string."""
    with open("VERSION","rt") as f:
        ver = f.readline().strip()
    return ver

VERSION = get_grib2decode_version()

# ----------------------------------------------------------------------------------------
# Create __config__.py
# ----------------------------------------------------------------------------------------
cnt = \
"""# This file is generated by grib2decode's setup.py
# It contains configuration information when building this package.
grib2decode_version = '%(grib2decode_version)s'
"""
a = open('src/grib2decode/__config__.py','w')
cfgdict = {}
cfgdict['grib2decode_version'] = VERSION
try:
    a.write(cnt % cfgdict)
finally:
    a.close()

# ----------------------------------------------------------------------------------------
# Import README.md as PyPi long_description
# ----------------------------------------------------------------------------------------
this_directory = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(this_directory, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

# ----------------------------------------------------------------------------------------
# Run setup.py.  See pyproject.toml for package metadata.
# ----------------------------------------------------------------------------------------
setup(long_description = long_description,
      long_description_content_type = 'text/markdown')
