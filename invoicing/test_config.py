"""
Tests for invoice PDF configuration
"""

from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase, override_settings
from reportlab.lib.pagesizes import A4, LETTER

from invoicing.config import PdfSettings, get_page_size, get_pdf_settings


class PdfSettingsTestCase(SimpleTestCase):
    """Test cases for settings resolution"""
    
    def test_defaults(self):
        """Test that the test settings give a Letter page with 540pt of width"""
        pdf_settings = get_pdf_settings()
        
        self.assertEqual(pdf_settings.pagesize, LETTER)
        self.assertEqual(pdf_settings.margin, 36)
        self.assertEqual(pdf_settings.frame_width, 540)
        self.assertEqual(pdf_settings.title, 'Invoice Receipt')
    
    @override_settings(INVOICE_PDF_PAGE_SIZE='a4', INVOICE_PDF_MARGIN=20, INVOICE_PDF_AUTHOR='Billing')
    def test_overrides(self):
        """Test that settings override the defaults"""
        pdf_settings = get_pdf_settings()
        
        self.assertEqual(pdf_settings.pagesize, A4)
        self.assertEqual(pdf_settings.margin, 20.0)
        self.assertEqual(pdf_settings.author, 'Billing')
    
    @override_settings(INVOICE_PDF_PAGE_SIZE='TABLOID-XL')
    def test_unknown_page_size(self):
        """Test that an unknown page size is a configuration error"""
        with self.assertRaises(ImproperlyConfigured) as cm:
            get_pdf_settings()
        
        self.assertIn('TABLOID-XL', str(cm.exception))
    
    def test_get_page_size_is_case_insensitive(self):
        self.assertEqual(get_page_size('letter'), LETTER)
    
    def test_frame_width(self):
        """Test usable width computation"""
        self.assertEqual(PdfSettings(pagesize=(600, 800), margin=50).frame_width, 500)
