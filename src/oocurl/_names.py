"""
Names of libcurl easy-handle options and transfer info values.

pycurl exports options, info values, error codes, global flags, multi
options and enumerated option values into one flat namespace, and their
numbers overlap (``E_URL_MALFORMAT == GLOBAL_ALL == PORT``). These tables
list the names that are genuine ``CURLOPT_*`` / ``CURLINFO_*`` identifiers,
as pycurl spells them.
"""

EASY_OPTIONS = frozenset({
    # Behavior
    "VERBOSE", "HEADER", "NOPROGRESS", "NOSIGNAL", "WILDCARDMATCH",
    # Callbacks (FILE, INFILE and WRITEHEADER are pycurl aliases)
    "WRITEFUNCTION", "WRITEDATA", "FILE",
    "READFUNCTION", "READDATA", "INFILE",
    "IOCTLFUNCTION", "IOCTLDATA", "SEEKFUNCTION", "SEEKDATA",
    "SOCKOPTFUNCTION", "SOCKOPTDATA",
    "OPENSOCKETFUNCTION", "OPENSOCKETDATA",
    "CLOSESOCKETFUNCTION", "CLOSESOCKETDATA",
    "PROGRESSFUNCTION", "PROGRESSDATA", "XFERINFOFUNCTION", "XFERINFODATA",
    "HEADERFUNCTION", "HEADERDATA", "WRITEHEADER",
    "DEBUGFUNCTION", "DEBUGDATA", "SSL_CTX_FUNCTION", "SSL_CTX_DATA",
    "INTERLEAVEFUNCTION", "INTERLEAVEDATA",
    "CHUNK_BGN_FUNCTION", "CHUNK_END_FUNCTION", "CHUNK_DATA",
    "FNMATCH_FUNCTION", "FNMATCH_DATA",
    "RESOLVER_START_FUNCTION", "RESOLVER_START_DATA",
    "PREREQFUNCTION", "PREREQDATA", "SSH_KEYFUNCTION", "SSH_KEYDATA",
    "TRAILERFUNCTION", "TRAILERDATA",
    # Errors
    "ERRORBUFFER", "STDERR", "FAILONERROR", "KEEP_SENDING_ON_ERROR",
    # Network
    "URL", "PATH_AS_IS", "PROTOCOLS", "PROTOCOLS_STR",
    "REDIR_PROTOCOLS", "REDIR_PROTOCOLS_STR", "DEFAULT_PROTOCOL",
    "PROXY", "PRE_PROXY", "PROXYPORT", "PROXYTYPE", "NOPROXY",
    "HTTPPROXYTUNNEL", "CONNECT_TO", "SOCKS5_AUTH",
    "SOCKS5_GSSAPI_SERVICE", "SOCKS5_GSSAPI_NEC", "PROXY_SERVICE_NAME",
    "HAPROXYPROTOCOL", "HAPROXY_CLIENT_IP", "SERVICE_NAME",
    "INTERFACE", "LOCALPORT", "LOCALPORTRANGE",
    "DNS_CACHE_TIMEOUT", "DNS_USE_GLOBAL_CACHE", "DOH_URL", "BUFFERSIZE",
    "PORT", "TCP_FASTOPEN", "TCP_NODELAY", "ADDRESS_SCOPE",
    "TCP_KEEPALIVE", "TCP_KEEPIDLE", "TCP_KEEPINTVL", "TCP_KEEPCNT",
    "UNIX_SOCKET_PATH", "ABSTRACT_UNIX_SOCKET",
    # Authentication
    "NETRC", "NETRC_FILE", "USERPWD", "PROXYUSERPWD",
    "USERNAME", "PASSWORD", "LOGIN_OPTIONS",
    "PROXYUSERNAME", "PROXYPASSWORD", "HTTPAUTH", "PROXYAUTH",
    "TLSAUTH_USERNAME", "PROXY_TLSAUTH_USERNAME",
    "TLSAUTH_PASSWORD", "PROXY_TLSAUTH_PASSWORD",
    "TLSAUTH_TYPE", "PROXY_TLSAUTH_TYPE",
    "SASL_AUTHZID", "SASL_IR", "XOAUTH2_BEARER", "DISALLOW_USERNAME_IN_URL",
    # HTTP
    "AUTOREFERER", "ACCEPT_ENCODING", "ENCODING", "TRANSFER_ENCODING",
    "FOLLOWLOCATION", "UNRESTRICTED_AUTH", "MAXREDIRS", "POSTREDIR",
    "PUT", "POST", "POSTFIELDS", "POSTFIELDSIZE", "POSTFIELDSIZE_LARGE",
    "COPYPOSTFIELDS", "HTTPPOST", "REFERER", "USERAGENT",
    "HTTPHEADER", "HEADEROPT", "PROXYHEADER", "HTTP200ALIASES",
    "COOKIE", "COOKIEFILE", "COOKIEJAR", "COOKIESESSION", "COOKIELIST",
    "OPT_COOKIELIST", "ALTSVC", "ALTSVC_CTRL", "HSTS", "HSTS_CTRL",
    "HTTPGET", "REQUEST_TARGET", "HTTP_VERSION", "HTTP09_ALLOWED",
    "IGNORE_CONTENT_LENGTH", "HTTP_CONTENT_DECODING",
    "HTTP_TRANSFER_DECODING", "EXPECT_100_TIMEOUT_MS", "PIPEWAIT",
    "STREAM_WEIGHT", "MIMEPOST", "AWS_SIGV4",
    # SMTP and TFTP
    "MAIL_FROM", "MAIL_RCPT", "MAIL_AUTH", "MAIL_RCPT_ALLOWFAILS",
    "TFTP_BLKSIZE", "TFTP_NO_OPTIONS",
    # FTP
    "FTPPORT", "QUOTE", "POSTQUOTE", "PREQUOTE", "APPEND", "FTPAPPEND",
    "FTP_USE_EPRT", "FTP_USE_EPSV", "FTP_USE_PRET",
    "FTP_CREATE_MISSING_DIRS", "FTP_RESPONSE_TIMEOUT",
    "SERVER_RESPONSE_TIMEOUT", "FTP_ALTERNATIVE_TO_USER",
    "FTP_SKIP_PASV_IP", "FTPSSLAUTH", "FTP_SSL_CCC", "FTP_ACCOUNT",
    "FTP_FILEMETHOD", "FTPLISTONLY", "DIRLISTONLY", "USE_SSL", "FTP_SSL",
    # RTSP
    "RTSP_REQUEST", "RTSP_SESSION_ID", "RTSP_STREAM_URI", "RTSP_TRANSPORT",
    "RTSP_CLIENT_CSEQ", "RTSP_SERVER_CSEQ",
    "OPT_RTSP_REQUEST", "OPT_RTSP_SESSION_ID", "OPT_RTSP_STREAM_URI",
    "OPT_RTSP_TRANSPORT", "OPT_RTSP_CLIENT_CSEQ", "OPT_RTSP_SERVER_CSEQ",
    # Protocol
    "TRANSFERTEXT", "PROXY_TRANSFER_MODE", "CRLF", "RANGE",
    "RESUME_FROM", "RESUME_FROM_LARGE", "CUSTOMREQUEST",
    "FILETIME", "OPT_FILETIME", "NOBODY",
    "INFILESIZE", "INFILESIZE_LARGE", "UPLOAD", "UPLOAD_BUFFERSIZE",
    "MIME_OPTIONS", "MAXFILESIZE", "MAXFILESIZE_LARGE",
    "TIMECONDITION", "TIMEVALUE", "TIMEVALUE_LARGE",
    # Connection
    "TIMEOUT", "TIMEOUT_MS", "LOW_SPEED_LIMIT", "LOW_SPEED_TIME",
    "MAX_SEND_SPEED_LARGE", "MAX_RECV_SPEED_LARGE", "MAXCONNECTS",
    "FRESH_CONNECT", "FORBID_REUSE", "MAXAGE_CONN", "MAXLIFETIME_CONN",
    "CONNECTTIMEOUT", "CONNECTTIMEOUT_MS", "IPRESOLVE", "CONNECT_ONLY",
    "RESOLVE", "DNS_SERVERS", "DNS_INTERFACE",
    "DNS_LOCAL_IP4", "DNS_LOCAL_IP6", "DNS_SHUFFLE_ADDRESSES",
    "ACCEPTTIMEOUT_MS", "HAPPY_EYEBALLS_TIMEOUT_MS", "UPKEEP_INTERVAL_MS",
    "QUICK_EXIT",
    # TLS
    "SSLCERT", "SSLCERT_BLOB", "PROXY_SSLCERT", "PROXY_SSLCERT_BLOB",
    "SSLCERTTYPE", "PROXY_SSLCERTTYPE",
    "SSLKEY", "SSLKEY_BLOB", "PROXY_SSLKEY", "PROXY_SSLKEY_BLOB",
    "SSLKEYTYPE", "PROXY_SSLKEYTYPE",
    "KEYPASSWD", "PROXY_KEYPASSWD", "SSLKEYPASSWD", "SSLCERTPASSWD",
    "SSL_EC_CURVES", "SSL_ENABLE_ALPN", "SSL_ENABLE_NPN",
    "SSLENGINE", "SSLENGINE_DEFAULT", "SSL_FALSESTART",
    "SSLVERSION", "PROXY_SSLVERSION",
    "SSL_VERIFYHOST", "DOH_SSL_VERIFYHOST", "PROXY_SSL_VERIFYHOST",
    "SSL_VERIFYPEER", "DOH_SSL_VERIFYPEER", "PROXY_SSL_VERIFYPEER",
    "SSL_VERIFYSTATUS", "DOH_SSL_VERIFYSTATUS",
    "CAINFO", "CAINFO_BLOB", "PROXY_CAINFO", "PROXY_CAINFO_BLOB",
    "ISSUERCERT", "ISSUERCERT_BLOB",
    "PROXY_ISSUERCERT", "PROXY_ISSUERCERT_BLOB",
    "CAPATH", "PROXY_CAPATH", "CRLFILE", "PROXY_CRLFILE",
    "CA_CACHE_TIMEOUT", "CERTINFO", "OPT_CERTINFO",
    "PINNEDPUBLICKEY", "PROXY_PINNEDPUBLICKEY",
    "RANDOM_FILE", "EGDSOCKET",
    "SSL_CIPHER_LIST", "PROXY_SSL_CIPHER_LIST",
    "TLS13_CIPHERS", "PROXY_TLS13_CIPHERS",
    "SSL_SESSIONID_CACHE", "SSL_OPTIONS", "PROXY_SSL_OPTIONS",
    "KRBLEVEL", "KRB4LEVEL", "GSSAPI_DELEGATION",
    # SSH
    "SSH_AUTH_TYPES", "SSH_COMPRESSION",
    "SSH_HOST_PUBLIC_KEY_MD5", "SSH_HOST_PUBLIC_KEY_SHA256",
    "SSH_PUBLIC_KEYFILE", "SSH_PRIVATE_KEYFILE", "SSH_KNOWNHOSTS",
    # Other
    "WS_OPTIONS", "PRIVATE", "SHARE", "TELNETOPTIONS",
    "NEW_FILE_PERMS", "NEW_DIRECTORY_PERMS",
})

INFO_VALUES = frozenset({
    "EFFECTIVE_URL", "EFFECTIVE_METHOD", "RESPONSE_CODE", "HTTP_CODE",
    "HTTP_CONNECTCODE", "HTTP_VERSION", "INFO_HTTP_VERSION",
    "FILETIME", "INFO_FILETIME", "FILETIME_T",
    "TOTAL_TIME", "NAMELOOKUP_TIME", "CONNECT_TIME", "APPCONNECT_TIME",
    "PRETRANSFER_TIME", "STARTTRANSFER_TIME", "REDIRECT_TIME",
    "TOTAL_TIME_T", "NAMELOOKUP_TIME_T", "CONNECT_TIME_T",
    "APPCONNECT_TIME_T", "PRETRANSFER_TIME_T", "STARTTRANSFER_TIME_T",
    "REDIRECT_TIME_T", "REDIRECT_COUNT", "REDIRECT_URL",
    "SIZE_UPLOAD", "SIZE_UPLOAD_T", "SIZE_DOWNLOAD", "SIZE_DOWNLOAD_T",
    "SPEED_DOWNLOAD", "SPEED_DOWNLOAD_T", "SPEED_UPLOAD", "SPEED_UPLOAD_T",
    "HEADER_SIZE", "REQUEST_SIZE",
    "SSL_VERIFYRESULT", "PROXY_SSL_VERIFYRESULT", "SSL_ENGINES",
    "CONTENT_LENGTH_DOWNLOAD", "CONTENT_LENGTH_DOWNLOAD_T",
    "CONTENT_LENGTH_UPLOAD", "CONTENT_LENGTH_UPLOAD_T",
    "CONTENT_TYPE", "PRIVATE", "HTTPAUTH_AVAIL", "PROXYAUTH_AVAIL",
    "OS_ERRNO", "NUM_CONNECTS", "PRIMARY_IP", "PRIMARY_PORT",
    "LOCAL_IP", "LOCAL_PORT", "INFO_COOKIELIST", "LASTSOCKET",
    "ACTIVESOCKET", "FTP_ENTRY_PATH", "INFO_CERTINFO", "CONDITION_UNMET",
    "INFO_RTSP_SESSION_ID", "INFO_RTSP_CLIENT_CSEQ",
    "INFO_RTSP_SERVER_CSEQ", "INFO_RTSP_CSEQ_RECV",
    "PROTOCOL", "SCHEME", "RETRY_AFTER", "PROXY_ERROR", "REFERER",
    "CAINFO", "CAPATH",
})
