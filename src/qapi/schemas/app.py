"""Application API schemas (``/api/v2/app/*``)"""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class BuildInfo(BaseModel):
    """Versions of the libraries the server was built with"""

    qt: str
    libtorrent: str
    boost: str
    openssl: str
    bitness: int


class ScanDirTarget(IntEnum):
    """Where torrents found in a watched folder are downloaded"""

    MONITORED_FOLDER = 0
    DEFAULT_SAVE_PATH = 1


class SchedulerDays(IntEnum):
    EVERY_DAY = 0
    EVERY_WEEKDAY = 1
    EVERY_WEEKEND = 2
    EVERY_MONDAY = 3
    EVERY_TUESDAY = 4
    EVERY_WEDNESDAY = 5
    EVERY_THURSDAY = 6
    EVERY_FRIDAY = 7
    EVERY_SATURDAY = 8
    EVERY_SUNDAY = 9


class Encryption(IntEnum):
    """Protocol encryption mode.

    PREFER allows both encrypted and plain connections; the other two are exclusive.
    """

    PREFER = 0
    FORCE_ON = 1
    FORCE_OFF = 2


class ProxyType(IntEnum):
    DISABLED = 0
    HTTP_NO_AUTH = 1
    SOCKS5_NO_AUTH = 2
    HTTP_AUTH = 3
    SOCKS5_AUTH = 4
    SOCKS4_NO_AUTH = 5


class DyndnsService(IntEnum):
    DYDNS = 0
    NOIP = 1


class MaxRatioAction(IntEnum):
    PAUSE = 0
    REMOVE = 1


class BittorrentProtocol(IntEnum):
    BOTH = 0
    TCP = 1
    UTP = 2


class UploadChokingAlgorithm(IntEnum):
    ROUND_ROBIN = 0
    FASTEST_UPLOAD = 1
    ANTI_LEECH = 2


class UploadSlotsBehavior(IntEnum):
    FIXED_SLOTS = 0
    UPLOAD_RATE_BASED = 1


class UtpTcpMixedMode(IntEnum):
    PREFER_TCP = 0
    PEER_PROPORTIONAL = 1


class Preferences(BaseModel):
    """Application preferences.

    Every field is optional. ``get_preferences`` fills in what the server reports;
    ``set_preferences`` sends only the fields that are set, and the server leaves
    the rest unchanged.
    """

    model_config = ConfigDict(populate_by_name=True)

    # Downloads
    locale: str | None = None
    create_subfolder_enabled: bool | None = None
    start_paused_enabled: bool | None = None
    auto_delete_mode: int | None = None
    preallocate_all: bool | None = None
    incomplete_files_ext: bool | None = None
    auto_tmm_enabled: bool | None = None
    torrent_changed_tmm_enabled: bool | None = None
    save_path_changed_tmm_enabled: bool | None = None
    category_changed_tmm_enabled: bool | None = None
    save_path: str | None = None
    temp_path_enabled: bool | None = None
    temp_path: str | None = None
    # Watched folder -> ScanDirTarget or an explicit save path
    scan_dirs: dict[str, ScanDirTarget | str] | None = None
    export_dir: str | None = None
    export_dir_fin: str | None = None

    # Notifications
    mail_notification_enabled: bool | None = None
    mail_notification_sender: str | None = None
    mail_notification_email: str | None = None
    mail_notification_smtp: str | None = None
    mail_notification_ssl_enabled: bool | None = None
    mail_notification_auth_enabled: bool | None = None
    mail_notification_username: str | None = None
    mail_notification_password: str | None = None
    autorun_enabled: bool | None = None
    autorun_program: str | None = None

    # Queueing and seeding limits
    queueing_enabled: bool | None = None
    max_active_downloads: int | None = None
    max_active_torrents: int | None = None
    max_active_uploads: int | None = None
    dont_count_slow_torrents: bool | None = None
    slow_torrent_dl_rate_threshold: int | None = None
    slow_torrent_ul_rate_threshold: int | None = None
    slow_torrent_inactive_timer: int | None = None
    max_ratio_enabled: bool | None = None
    max_ratio: float | None = None
    max_ratio_act: MaxRatioAction | None = None
    max_seeding_time_enabled: bool | None = None
    max_seeding_time: int | None = None

    # Connection
    listen_port: int | None = None
    upnp: bool | None = None
    random_port: bool | None = None
    dl_limit: int | None = None
    up_limit: int | None = None
    max_connec: int | None = None
    max_connec_per_torrent: int | None = None
    max_uploads: int | None = None
    max_uploads_per_torrent: int | None = None
    stop_tracker_timeout: int | None = None
    enable_piece_extent_affinity: bool | None = None
    bittorrent_protocol: BittorrentProtocol | None = None
    limit_utp_rate: bool | None = None
    limit_tcp_overhead: bool | None = None
    limit_lan_peers: bool | None = None

    # Alternative speed limits and scheduler
    alt_dl_limit: int | None = None
    alt_up_limit: int | None = None
    scheduler_enabled: bool | None = None
    schedule_from_hour: int | None = None
    schedule_from_min: int | None = None
    schedule_to_hour: int | None = None
    schedule_to_min: int | None = None
    scheduler_days: SchedulerDays | None = None

    # BitTorrent
    dht: bool | None = None
    pex: bool | None = None
    lsd: bool | None = None
    encryption: Encryption | None = None
    anonymous_mode: bool | None = None

    # Proxy
    proxy_type: ProxyType | None = None
    proxy_ip: str | None = None
    proxy_port: int | None = None
    proxy_peer_connections: bool | None = None
    proxy_auth_enabled: bool | None = None
    proxy_username: str | None = None
    proxy_password: str | None = None
    proxy_torrents_only: bool | None = None

    # IP filtering
    ip_filter_enabled: bool | None = None
    ip_filter_path: str | None = None
    ip_filter_trackers: bool | None = None
    banned_ips: str | None = Field(default=None, alias='banned_IPs')

    # Web UI
    web_ui_domain_list: str | None = None
    web_ui_address: str | None = None
    web_ui_port: int | None = None
    web_ui_upnp: bool | None = None
    web_ui_username: str | None = None
    web_ui_password: str | None = None
    web_ui_csrf_protection_enabled: bool | None = None
    web_ui_clickjacking_protection_enabled: bool | None = None
    web_ui_secure_cookie_enabled: bool | None = None
    web_ui_max_auth_fail_count: int | None = None
    web_ui_ban_duration: int | None = None
    web_ui_session_timeout: int | None = None
    web_ui_host_header_validation_enabled: bool | None = None
    bypass_local_auth: bool | None = None
    bypass_auth_subnet_whitelist_enabled: bool | None = None
    bypass_auth_subnet_whitelist: str | None = None
    alternative_webui_enabled: bool | None = None
    alternative_webui_path: str | None = None
    use_https: bool | None = None
    ssl_key: str | None = None
    ssl_cert: str | None = None
    web_ui_https_key_path: str | None = None
    web_ui_https_cert_path: str | None = None
    web_ui_use_custom_http_headers_enabled: bool | None = None
    web_ui_custom_http_headers: str | None = None

    # Dynamic DNS
    dyndns_enabled: bool | None = None
    dyndns_service: DyndnsService | None = None
    dyndns_username: str | None = None
    dyndns_password: str | None = None
    dyndns_domain: str | None = None

    # RSS
    rss_refresh_interval: int | None = None
    rss_max_articles_per_feed: int | None = None
    rss_processing_enabled: bool | None = None
    rss_auto_downloading_enabled: bool | None = None
    rss_download_repack_proper_episodes: bool | None = None
    rss_smart_episode_filters: str | None = None

    # Trackers
    add_trackers_enabled: bool | None = None
    add_trackers: str | None = None
    announce_ip: str | None = None
    announce_to_all_tiers: bool | None = None
    announce_to_all_trackers: bool | None = None

    # Advanced (libtorrent)
    async_io_threads: int | None = None
    checking_memory_use: int | None = None
    current_interface_address: str | None = None
    current_network_interface: str | None = None
    disk_cache: int | None = None
    disk_cache_ttl: int | None = None
    embedded_tracker_port: int | None = None
    enable_coalesce_read_write: bool | None = None
    enable_embedded_tracker: bool | None = None
    enable_multi_connections_from_same_ip: bool | None = None
    enable_os_cache: bool | None = None
    enable_upload_suggestions: bool | None = None
    file_pool_size: int | None = None
    outgoing_ports_max: int | None = None
    outgoing_ports_min: int | None = None
    recheck_completed_torrents: bool | None = None
    resolve_peer_countries: bool | None = None
    save_resume_data_interval: int | None = None
    send_buffer_low_watermark: int | None = None
    send_buffer_watermark: int | None = None
    send_buffer_watermark_factor: int | None = None
    socket_backlog_size: int | None = None
    upload_choking_algorithm: UploadChokingAlgorithm | None = None
    upload_slots_behavior: UploadSlotsBehavior | None = None
    upnp_lease_duration: int | None = None
    utp_tcp_mixed_mode: UtpTcpMixedMode | None = None
