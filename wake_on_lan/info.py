import os

__app_name__ = "wake-on-lan"
__package_name__ = "wake-on-lan"

with open(os.path.join(os.path.dirname(__file__), "VERSION"), "r") as version_file:
    __version__ = version_file.read().strip()

__description__ = "A tool to send Wake-On-LAN magic packets to a /24 network broadcast address."
__author__ = "Septimiu Ujica"
__author_email__ = "hellp@septi.ro"
__author_url__ = "https://www.septi.ro"
__license__ = "GPLv3"
