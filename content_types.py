from types import MappingProxyType

DEFAULT_EXTENSION = 'txt'

# Exact Content-Type header value -> file extension (lowercase, no dot).
# Lookups are exact: "text/html; charset=utf-8" is not "text/html".
CONTENT_TYPE_EXTENSIONS = MappingProxyType({
    # text
    'text/plain': 'txt',
    'text/html': 'html',
    'text/css': 'css',
    'text/csv': 'csv',
    'text/javascript': 'js',
    'text/markdown': 'md',
    'text/xml': 'xml',
    'text/calendar': 'ics',
    'text/tab-separated-values': 'tsv',
    # application
    'application/json': 'json',
    'application/ld+json': 'jsonld',
    'application/xml': 'xml',
    'application/xhtml+xml': 'xhtml',
    'application/javascript': 'js',
    'application/pdf': 'pdf',
    'application/zip': 'zip',
    'application/gzip': 'gz',
    'application/x-gzip': 'gz',
    'application/x-tar': 'tar',
    'application/x-bzip2': 'bz2',
    'application/x-7z-compressed': '7z',
    'application/vnd.rar': 'rar',
    'application/octet-stream': 'bin',
    'application/msword': 'doc',
    'application/vnd.openxmlformats-officedocument.wordprocessingml.document': 'docx',
    'application/vnd.ms-excel': 'xls',
    'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet': 'xlsx',
    'application/vnd.ms-powerpoint': 'ppt',
    'application/vnd.openxmlformats-officedocument.presentationml.presentation': 'pptx',
    'application/rtf': 'rtf',
    'application/epub+zip': 'epub',
    'application/java-archive': 'jar',
    'application/wasm': 'wasm',
    'application/x-sh': 'sh',
    'application/yaml': 'yaml',
    'application/toml': 'toml',
    'application/sql': 'sql',
    # images
    'image/png': 'png',
    'image/jpeg': 'jpg',
    'image/gif': 'gif',
    'image/webp': 'webp',
    'image/avif': 'avif',
    'image/bmp': 'bmp',
    'image/tiff': 'tiff',
    'image/svg+xml': 'svg',
    'image/x-icon': 'ico',
    'image/vnd.microsoft.icon': 'ico',
    # audio
    'audio/mpeg': 'mp3',
    'audio/ogg': 'oga',
    'audio/wav': 'wav',
    'audio/webm': 'weba',
    'audio/aac': 'aac',
    'audio/flac': 'flac',
    # video
    'video/mp4': 'mp4',
    'video/mpeg': 'mpeg',
    'video/ogg': 'ogv',
    'video/webm': 'webm',
    'video/quicktime': 'mov',
    'video/x-msvideo': 'avi',
    # fonts
    'font/woff': 'woff',
    'font/woff2': 'woff2',
    'font/ttf': 'ttf',
    'font/otf': 'otf',
})


def type_to_extension(content_type):
    """Returns the extension for an exact Content-Type value, 'txt' if unknown."""
    return CONTENT_TYPE_EXTENSIONS.get(content_type, DEFAULT_EXTENSION)
