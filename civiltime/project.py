__pkg_bottom__ = True
identity = 'http://fault.io/project/python/civiltime'
name = 'civiltime'
abstract = 'Integer second instants and proleptic gregorian civil fields.'
icon = '📅'
study = 'horology'

controller = 'fault.io'
contact = 'mailto:critical@fault.io'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
