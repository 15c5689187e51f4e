SECRET_KEY = 'invoicing-test-secret-key'

INSTALLED_APPS = [
    'invoicing',
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

USE_TZ = True

INVOICE_PDF_PAGE_SIZE = 'LETTER'
INVOICE_PDF_MARGIN = 36
