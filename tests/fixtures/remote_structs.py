"""Sample XML-RPC structs as returned by the Confluence remote API.

Numeric values are strings, matching what the server sends.
"""

SERVER_INFO_V3 = {
    'majorVersion': '3',
    'minorVersion': '5',
    'patchLevel': '13',
    'buildId': '2176',
    'developmentBuild': 'false',
    'baseUrl': 'https://wiki.example.com',
}

SERVER_INFO_V4 = {
    'majorVersion': 4,
    'minorVersion': 3,
    'patchLevel': 7,
    'buildId': '4391',
    'developmentBuild': False,
    'baseUrl': 'https://wiki.example.com',
}

SPACE = {
    'key': 'TEAM',
    'name': 'Team Space',
    'url': 'https://wiki.example.com/display/TEAM',
    'homePage': '98305',
    'description': 'Team documentation',
    'type': 'global',
}

PAGE_SUMMARY = {
    'id': '123456',
    'space': 'TEAM',
    'parentId': '98305',
    'title': 'Build Results',
    'url': 'https://wiki.example.com/display/TEAM/Build+Results',
    'locks': '0',
}

PAGE = dict(
    PAGE_SUMMARY,
    version='7',
    content='<p>Latest build: green</p>',
    created='20240115T10:30:00',
    creator='builder',
    modified='20240116T08:00:00',
    modifier='builder',
    homePage='false',
    contentStatus='current',
    current='true',
)

ATTACHMENT = {
    'id': '5555',
    'pageId': '123456',
    'title': 'report.html',
    'fileName': 'report.html',
    'fileSize': '2048',
    'contentType': 'text/html',
    'created': '20240116T08:01:00',
    'creator': 'builder',
    'url': 'https://wiki.example.com/download/attachments/123456/report.html',
    'comment': 'Nightly report',
}
