"""Small RangeMessage documents for the tests."""

from typing import Iterable, Optional, Tuple

SERIAL = '9a0e1c8c-42f1-4b43-9d3e-6a1f3e0d2b57'
DATE = 'Tue, 12 Jan 2021 15:02:44 GMT'

def group_xml(prefix: str, agency: str, rules: Iterable[Tuple[str, str]]) -> str:
    rules_xml = ''.join(
        f"\n          <Rule>\n            <Range>{value_range}</Range>\n            <Length>{length}</Length>\n          </Rule>"
        for value_range, length in rules
    )
    return f"""
    <Group>
      <Prefix>{prefix}</Prefix>
      <Agency>{agency}</Agency>
      <Rules>{rules_xml}
      </Rules>
    </Group>"""

def range_message(groups: str, serial: Optional[str] = SERIAL, date: Optional[str] = DATE,
                  registration_groups: bool = True) -> str:
    header = '<?xml version="1.0" encoding="utf-8"?>\n<ISBNRangeMessage>\n'
    header += '  <MessageSource>International ISBN Agency</MessageSource>\n'
    if serial is not None:
        header += f'  <MessageSerialNumber>{serial}</MessageSerialNumber>\n'
    if date is not None:
        header += f'  <MessageDate>{date}</MessageDate>\n'

    # The top-level prefixes carry a Prefix and Rules of their own, outside RegistrationGroups
    header += """  <EAN.UCCPrefixes>
    <EAN.UCC>
      <Prefix>978</Prefix>
      <Agency>International ISBN Agency</Agency>
      <Rules>
        <Rule>
          <Range>0000000-5999999</Range>
          <Length>1</Length>
        </Rule>
      </Rules>
    </EAN.UCC>
  </EAN.UCCPrefixes>
"""
    if registration_groups:
        body = f"  <RegistrationGroups>{groups}\n  </RegistrationGroups>\n"
    else:
        body = groups
    return header + body + '</ISBNRangeMessage>\n'

STANDARD_GROUPS = ''.join([
    group_xml('978-0', 'English language', [
        ('0000000-1999999', '2'),
        ('2000000-2279999', '3'),
        ('2280000-2289999', '4'),
        ('2290000-6479999', '3'),
        ('6480000-6489999', '7'),
    ]),
    group_xml('978-2', 'French language', [
        ('0000000-1999999', '2'),
        ('2000000-3499999', '3'),
        ('3500000-3999999', '5'),
    ]),
    group_xml('978-953', 'Croatia     ', [
        ('0000000-0999999', '1'),
        ('1000000-1499999', '2'),
    ]),
    group_xml('978-99902', 'Reserved Agency', [
        ('0000000-9999999', '0'),
    ]),
    group_xml('979-12', 'Italy', [
        ('0000000-1999999', '0'),
        ('2000000-2999999', '3'),
        ('3000000-5449999', '0'),
        ('5450000-5999999', '4'),
    ]),
])

STANDARD_MESSAGE = range_message(STANDARD_GROUPS)
