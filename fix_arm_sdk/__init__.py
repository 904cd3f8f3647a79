__title__ = "fix-arm-sdk"
__description__ = "Async Azure Resource Manager clients for selected services."
__author__ = "Some Engineering Inc."
__license__ = "Apache 2.0"
__copyright__ = "Copyright © 2024 Some Engineering Inc."
__version__ = "0.1.0"
