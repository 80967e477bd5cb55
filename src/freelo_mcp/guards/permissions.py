"""Permission sets defining read-only vs write tool groups."""

READ_TOOLS = frozenset({
    "freelo_list_projects",
    "freelo_get_all_projects",
    "freelo_get_project",
    "freelo_list_tasks",
    "freelo_get_all_tasks",
    "freelo_get_task",
    "freelo_list_tasklists",
    "freelo_get_tasklist",
    "freelo_list_comments",
    "freelo_list_work_reports",
    "freelo_list_users",
    "freelo_list_notifications",
    "freelo_search",
    "freelo_download_file",
})

WRITE_TOOLS = frozenset({
    "freelo_create_project",
    "freelo_archive_project",
    "freelo_activate_project",
    "freelo_delete_project",
    "freelo_create_task",
    "freelo_update_task",
    "freelo_finish_task",
    "freelo_activate_task",
    "freelo_move_task",
    "freelo_delete_task",
    "freelo_create_tasklist",
    "freelo_add_comment",
    "freelo_start_timer",
    "freelo_stop_timer",
    "freelo_create_work_report",
    "freelo_mark_notification_read",
    "freelo_upload_file",
})

ALL_TOOLS = READ_TOOLS | WRITE_TOOLS
