DEFAULT_LOCALE = 'en'

MESSAGES = {
    'en': {
        'page_title': 'Meeting Organizer',
        'form_title_create': 'Create New Meeting',
        'form_title_edit': 'Edit Meeting',
        'list_title': 'Meetings',
        'label_topic': 'Topic',
        'label_date': 'Date',
        'label_start_time': 'Start Time',
        'label_end_time': 'End Time',
        'label_participants': 'Participants',
        'label_actions': 'Actions',
        'label_language': 'Language',
        'button_create': 'Create Meeting',
        'button_update': 'Update Meeting',
        'button_cancel': 'Cancel',
        'button_edit': 'Edit',
        'button_delete': 'Delete',
        'no_meetings': 'No meetings found.',
        'error_required': 'All fields except participants are required',
        'error_invalid': 'Date and times must be valid (YYYY-MM-DD, HH:MM)',
        'error_past': 'Meeting date and start time must be in the future',
        'error_order': 'End time must be after start time',
        'error_fetch': 'Failed to fetch meetings',
        'error_save': 'Failed to save meeting',
        'error_delete': 'Failed to delete meeting',
        'error_not_found': 'Meeting not found',
        'notice_created': 'Meeting successfully created',
        'notice_updated': 'Meeting successfully edited',
        'notice_deleted': 'Meeting successfully deleted',
    },
    'tr': {
        'page_title': 'Toplantı Düzenleyici',
        'form_title_create': 'Yeni Toplantı Oluştur',
        'form_title_edit': 'Toplantıyı Düzenle',
        'list_title': 'Toplantılar',
        'label_topic': 'Konu',
        'label_date': 'Tarih',
        'label_start_time': 'Başlangıç Saati',
        'label_end_time': 'Bitiş Saati',
        'label_participants': 'Katılımcılar',
        'label_actions': 'İşlemler',
        'label_language': 'Dil',
        'button_create': 'Toplantı Oluştur',
        'button_update': 'Toplantıyı Güncelle',
        'button_cancel': 'İptal',
        'button_edit': 'Düzenle',
        'button_delete': 'Sil',
        'no_meetings': 'Toplantı bulunamadı.',
        'error_required': 'Katılımcılar dışındaki tüm alanlar zorunludur',
        'error_invalid': 'Tarih ve saatler geçerli olmalıdır (YYYY-AA-GG, SS:DD)',
        'error_past': 'Toplantı tarihi ve başlangıç saati gelecekte olmalıdır',
        'error_order': 'Bitiş saati başlangıç saatinden sonra olmalıdır',
        'error_fetch': 'Toplantılar alınamadı',
        'error_save': 'Toplantı kaydedilemedi',
        'error_delete': 'Toplantı silinemedi',
        'error_not_found': 'Toplantı bulunamadı',
        'notice_created': 'Toplantı başarıyla oluşturuldu',
        'notice_updated': 'Toplantı başarıyla düzenlendi',
        'notice_deleted': 'Toplantı başarıyla silindi',
    },
}

SUPPORTED_LOCALES = tuple(MESSAGES)

def get_messages(locale):
    """Return the string table for a locale, falling back to English."""
    return MESSAGES.get(locale, MESSAGES[DEFAULT_LOCALE])
